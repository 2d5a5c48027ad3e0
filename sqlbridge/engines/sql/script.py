"""
SQL script loading and statement splitting.
"""

from pathlib import Path


def starts_dash_comment(sql: str, i: int) -> bool:
    """True if a MySQL "-- " comment starts at *i*. The dashes must be followed by
    whitespace, a control character or the end of input; "a--1" is arithmetic."""
    if not sql.startswith("--", i):
        return False
    return i + 2 == len(sql) or sql[i + 2].isspace() or ord(sql[i + 2]) < 32


def read_script(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole script file. OSError / UnicodeDecodeError propagate."""
    return Path(path).read_text(encoding=encoding)


def split_statements(sql: str) -> list[str]:
    """Split SQL into statements on ``;`` while respecting quotes and comments.

    Handles single-quoted, double-quoted and backtick-quoted text plus ``--``,
    ``#`` and ``/* */`` comments, so semicolons inside them are not treated
    as statement terminators. ``DELIMITER`` directives are not supported.
    """
    stmts: list[str] = []
    current: list[str] = []
    i = 0
    length = len(sql)

    while i < length:
        ch = sql[i]

        if ch in ("'", '"', "`"):
            quote = ch
            current.append(ch)
            i += 1
            while i < length:
                c = sql[i]
                current.append(c)
                if c == quote:
                    if i + 1 < length and sql[i + 1] == quote:
                        current.append(sql[i + 1])
                        i += 2
                        continue
                    i += 1
                    break
                if c == "\\" and quote != "`" and i + 1 < length:
                    current.append(sql[i + 1])
                    i += 2
                    continue
                i += 1
            continue

        if ch == "#" or starts_dash_comment(sql, i):
            end = sql.find("\n", i)
            if end == -1:
                current.append(sql[i:])
                i = length
            else:
                current.append(sql[i : end + 1])
                i = end + 1
            continue

        if ch == "/" and i + 1 < length and sql[i + 1] == "*":
            end = sql.find("*/", i + 2)
            if end == -1:
                current.append(sql[i:])
                i = length
            else:
                current.append(sql[i : end + 2])
                i = end + 2
            continue

        if ch == ";":
            stmt = "".join(current).strip()
            if stmt:
                stmts.append(stmt)
            current = []
            i += 1
            continue

        current.append(ch)
        i += 1

    tail = "".join(current).strip()
    if tail:
        stmts.append(tail)
    return stmts
