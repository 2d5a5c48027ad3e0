"""Unit tests for engines.sql.builder."""

import pytest

from sqlbridge.engines.sql import (
    array_to_query_string,
    build_delete,
    build_insert,
    build_select,
    build_update,
)


class TestArrayToQueryString:
    def test_empty(self):
        assert array_to_query_string([]) == ""

    def test_single(self):
        assert array_to_query_string(["a"]) == "(a)"

    def test_many(self):
        assert array_to_query_string(["a", "b", "c"]) == "(a, b, c)"

    def test_non_strings_are_stringified(self):
        assert array_to_query_string([1, None, 2.5]) == "(1, None, 2.5)"

    def test_accepts_generators(self):
        assert array_to_query_string(x for x in ("id", "name")) == "(id, name)"


def test_build_insert_with_fields() -> None:
    sql = build_insert("users", ["id", "name"], 2)
    assert sql == "INSERT INTO users (id, name) VALUES (?, ?)"


def test_build_insert_without_fields_omits_column_list() -> None:
    assert build_insert("users", [], 3) == "INSERT INTO users VALUES (?, ?, ?)"


def test_build_update_interpolates_values_raw() -> None:
    sql = build_update("users", {"name": "'bob'", "age": 42}, "id = 1")
    assert sql == "UPDATE users SET name='bob', age=42 WHERE id = 1"


def test_build_update_requires_values() -> None:
    with pytest.raises(ValueError, match="at least one"):
        build_update("users", {}, "id = 1")


def test_build_delete() -> None:
    assert build_delete("users", "id = 7") == "DELETE FROM users WHERE id = 7"


class TestBuildSelect:
    def test_all_without_condition(self):
        assert build_select("t") == "SELECT * FROM t"

    def test_all_with_condition(self):
        assert build_select("t", condition="a = 1") == "SELECT * FROM t WHERE a = 1"

    def test_fields_without_condition(self):
        assert build_select("t", ["a", "b"]) == "SELECT a, b FROM t"

    def test_fields_with_condition(self):
        assert build_select("t", ["a"], "b > 2") == "SELECT a FROM t WHERE b > 2"

    def test_empty_fields_selects_star(self):
        assert build_select("t", []) == "SELECT * FROM t"
