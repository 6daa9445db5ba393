"""Input/output helpers for the wordbits CLI."""
import csv
import json
import os
import sys
from collections.abc import Iterable
from typing import TextIO


def parse_word(text: str | int) -> int:
    """Parse a word literal: decimal, ``0b``, ``0o`` or ``0x`` prefixed, underscores allowed."""
    if isinstance(text, int):
        return text
    return int(str(text).strip(), 0)


def _read_text_lines(handle: TextIO) -> list[int]:
    return [parse_word(line) for line in handle if line.strip()]


def _read_jsonl(handle: TextIO) -> list[int]:
    data: list[int] = []
    for raw in handle:
        raw = raw.strip()
        if not raw:
            continue
        obj = json.loads(raw)
        if isinstance(obj, dict) and "value" in obj:
            value = obj["value"]
        else:
            value = obj
        data.append(parse_word(value))
    return data


def _read_csv(handle: TextIO, column: str = "value") -> list[int]:
    reader = csv.DictReader(handle)
    fieldnames = reader.fieldnames or []
    if column not in fieldnames:
        raise ValueError(f"CSV missing required column '{column}'")
    return [parse_word(row[column]) for row in reader if row.get(column)]


def _open_path(path: str) -> Iterable[int]:
    if path == "-":
        yield from _read_text_lines(sys.stdin)
        return
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext in {".json", ".jsonl"}:
        with open(path, encoding="utf-8") as handle:
            yield from _read_jsonl(handle)
    elif ext in {".csv"}:
        with open(path, encoding="utf-8", newline="") as handle:
            yield from _read_csv(handle)
    else:
        with open(path, encoding="utf-8") as handle:
            yield from _read_text_lines(handle)


def read_words(path: str) -> list[int]:
    return list(_open_path(path))


def write_json(obj: dict, path: str) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
