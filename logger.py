"""Structured logging helpers for played hands."""

from __future__ import annotations

import csv
import json
from typing import Optional

from session import HandRecord


FIELDNAMES = ["hand_number", "cards", "score", "category", "error"]


class HandLogger:
    def __init__(self, path: str, *, fmt: str = "jsonl") -> None:
        self.path = path
        self.format = fmt.lower()
        if self.format not in {"jsonl", "csv"}:
            raise ValueError(f"Unsupported log format: {self.format}")
        newline = "\n" if self.format == "csv" else ""
        self._handle = open(path, "w", encoding="utf-8", newline=newline)
        self._writer: Optional[csv.DictWriter] = None
        if self.format == "csv":
            self._writer = csv.DictWriter(self._handle, fieldnames=FIELDNAMES)
            self._writer.writeheader()

    def __enter__(self) -> "HandLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, record: HandRecord) -> None:
        if self.format == "jsonl":
            json.dump(record.to_dict(), self._handle, ensure_ascii=False)
            self._handle.write("\n")
        else:
            assert self._writer is not None
            row = {key: "" if value is None else value for key, value in record.to_dict().items()}
            self._writer.writerow(row)
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()


__all__ = ["HandLogger"]
