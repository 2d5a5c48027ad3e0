"""
SQL text building, parameter binding and script splitting.

Exports: builders, bind_parameters, BoundStatement, split_statements, read_script.
"""

from sqlbridge.engines.sql.binding import BoundStatement, bind_parameters, to_driver_placeholders
from sqlbridge.engines.sql.builder import (
    array_to_query_string,
    build_delete,
    build_insert,
    build_select,
    build_update,
)
from sqlbridge.engines.sql.script import read_script, split_statements

__all__ = [
    "array_to_query_string",
    "build_insert",
    "build_update",
    "build_delete",
    "build_select",
    "bind_parameters",
    "BoundStatement",
    "to_driver_placeholders",
    "split_statements",
    "read_script",
]
