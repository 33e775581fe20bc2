from __future__ import annotations

from pathlib import Path
import re

import pandas as pd

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def export_to_csv(data_to_export: pd.DataFrame, filename: str | Path) -> None:
    """Write ``data_to_export`` to ``filename`` as CSV without index."""
    data_to_export.to_csv(filename, index=False)


def split_fields(line: str, separator: str) -> list[str]:
    """Split ``line`` on ``separator`` and drop trailing empty fields.

    ``"25,tcp,"`` therefore yields two fields and an empty line yields none,
    so a missing last column is treated as a short row.
    """
    fields = line.split(separator)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_int_token(token: str) -> int | None:
    """Return ``int(token)`` for an optionally signed run of ASCII digits.

    Anything else, including surrounding whitespace or a value outside the
    signed 32-bit range, yields ``None``.
    """
    if _INT_TOKEN.fullmatch(token) is None:
        return None
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def strip_line_ending(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` from ``line``."""
    return line.rstrip("\r\n")


__all__ = [
    "export_to_csv",
    "split_fields",
    "parse_int_token",
    "strip_line_ending",
]
