"""Small text and binary file exercises: a profile text and a fixed-size person record."""

from __future__ import annotations

import struct
from pathlib import Path

PROFILE_LINES = ("姓名:张三", "性别:男", "年龄:18")
NAME_SIZE = 64
_PERSON = struct.Struct(f"<{NAME_SIZE}si")


def save_text_profile(filename: str | Path) -> None:
    """Write the sample profile, one field per line."""
    Path(filename).write_text("".join(f"{line}\n" for line in PROFILE_LINES), encoding="utf-8")


def save_binary_person(filename: str | Path, name: str, age: int) -> None:
    """Write a person as a 64-byte NUL-padded name followed by a 32-bit age."""
    raw_name = name.encode("utf-8")
    if len(raw_name) >= NAME_SIZE:
        raise ValueError(f"name must encode to fewer than {NAME_SIZE} bytes")
    try:
        record = _PERSON.pack(raw_name, age)
    except struct.error as exc:
        raise ValueError(f"age out of range: {age}") from exc
    Path(filename).write_bytes(record)


def read_binary_person(filename: str | Path) -> tuple[str, int]:
    """Read back ``(name, age)`` written by :func:`save_binary_person`."""
    data = Path(filename).read_bytes()
    if len(data) < _PERSON.size:
        raise ValueError("file is too short to hold a person record")
    raw_name, age = _PERSON.unpack_from(data)
    name = raw_name.split(b"\0", 1)[0].decode("utf-8")
    return name, age


def read_words(filename: str | Path) -> list[str]:
    """Return the whitespace-separated words of a text file; empty for an empty file."""
    return Path(filename).read_text(encoding="utf-8").split()