"""Logging helpers for persisting generation usage."""

from __future__ import annotations

import csv
import os
from typing import Any, Dict, List

FIELDNAMES: List[str] = [
    "timestamp",
    "prompt_id",
    "model",
    "prompt_tokens",
    "completion_tokens",
    "total_tokens",
    "duration_sec",
]


def _read_header(log_path: str) -> List[str] | None:
    with open(log_path, "r", newline="", encoding="utf-8") as existing:
        return next(csv.reader(existing), None)


def log_generation(log_path: str, row: Dict[str, Any]) -> None:
    """Append ``row`` to the usage CSV at ``log_path``.

    A file written with different columns is moved aside to ``<log_path>.bak``
    and a fresh file is started, so every file holds a single header.
    """

    write_header = True
    if os.path.exists(log_path):
        existing_header = _read_header(log_path)
        if existing_header == FIELDNAMES:
            write_header = False
        elif existing_header is not None:
            os.replace(log_path, f"{log_path}.bak")

    mode = "w" if write_header else "a"
    with open(log_path, mode, newline="", encoding="utf-8") as file:
        writer = csv.DictWriter(file, fieldnames=FIELDNAMES)
        if write_header:
            writer.writeheader()
        writer.writerow(row)
