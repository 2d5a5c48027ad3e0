"""
Positional parameter binding.

Queries are written with ``?`` placeholders. PyMySQL has no server-side
prepare and formats queries client-side with ``%s`` (escaping every value),
so a bound statement keeps the ``?`` form for display and translates it to
the driver form once, at bind time.
"""

from collections.abc import Sequence
from typing import Any

from sqlbridge.core.connector import execute
from sqlbridge.core.exceptions import ArgumentCountError
from sqlbridge.engines.sql.script import starts_dash_comment


def to_driver_placeholders(query: str) -> tuple[str, int]:
    """Translate ``?`` placeholders to ``%s`` and return (driver_sql, placeholder_count).

    ``?`` inside quoted literals, backtick identifiers and comments is left
    alone. Every literal ``%`` is doubled since the driver applies
    %-formatting to the whole query.
    """
    out: list[str] = []
    count = 0
    i = 0
    length = len(query)

    while i < length:
        ch = query[i]

        if ch in ("'", '"', "`"):
            quote = ch
            out.append(ch)
            i += 1
            while i < length:
                c = query[i]
                if c == "\\" and quote != "`" and i + 1 < length:
                    nxt = query[i + 1]
                    out.append(c)
                    out.append("%%" if nxt == "%" else nxt)
                    i += 2
                    continue
                out.append("%%" if c == "%" else c)
                i += 1
                if c == quote:
                    if i < length and query[i] == quote:
                        out.append(quote)
                        i += 1
                        continue
                    break
            continue

        if ch == "#" or starts_dash_comment(query, i):
            end = query.find("\n", i)
            end = length if end == -1 else end + 1
            out.append(query[i:end].replace("%", "%%"))
            i = end
            continue

        if ch == "/" and query.startswith("/*", i):
            end = query.find("*/", i + 2)
            end = length if end == -1 else end + 2
            out.append(query[i:end].replace("%", "%%"))
            i = end
            continue

        if ch == "?":
            out.append("%s")
            count += 1
        elif ch == "%":
            out.append("%%")
        else:
            out.append(ch)
        i += 1

    return "".join(out), count


def _bind_text(value: Any) -> str | None:
    """Text form of a value for untyped binding. NULL stays NULL."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


class BoundStatement:
    """A ``?``-placeholder query with its values bound, ready to execute once or many times."""

    def __init__(self, connection: Any, query: str, sql: str, params: tuple[Any, ...]) -> None:
        self.connection = connection
        self.query = query
        self.sql = sql
        self.params = params

    def execute(self) -> int:
        """Run the statement and return the affected row count. Driver errors propagate."""
        cur = execute(self.connection, self.sql, self.params)
        try:
            return cur.rowcount if cur.rowcount is not None else 0
        finally:
            cur.close()

    def __repr__(self) -> str:
        return f"BoundStatement({self.query!r}, params={self.params!r})"


def bind_parameters(
    connection: Any,
    query: str,
    values: Sequence[Any],
    *,
    typed: bool = False,
) -> BoundStatement:
    """
    Bind *values* to the ``?`` placeholders of *query*, in order.

    By default every value is bound as text (``str(value)``; booleans as
    "1"/"0"). With ``typed=True`` values go to the driver as-is and are
    escaped according to their Python type.
    """
    sql, count = to_driver_placeholders(query)
    if count != len(values):
        raise ArgumentCountError(
            f"Query has {count} placeholder(s) but {len(values)} value(s) were given"
        )
    if typed:
        params = tuple(values)
    else:
        params = tuple(_bind_text(v) for v in values)
    return BoundStatement(connection, query, sql, params)
