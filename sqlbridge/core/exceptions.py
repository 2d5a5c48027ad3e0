"""Errors raised by sqlbridge itself. Driver errors are re-raised untouched."""


class ArgumentCountError(ValueError):
    """Raised when the number of fields, values or placeholders does not line up."""

    pass
