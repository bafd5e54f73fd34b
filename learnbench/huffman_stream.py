"""Huffman compression with a binary frequency-table header.

The layout is ``b"HUFF"``, a little-endian 32-bit entry count, one entry per
byte value (one byte followed by a little-endian 32-bit frequency), then the
packed code bits, most significant bit first.
"""

from __future__ import annotations

import struct
from collections import Counter
from collections.abc import Mapping
from pathlib import Path

from learnbench.huffman_file import HuffmanNode, HuffmanTree

MAGIC = b"HUFF"
_COUNT = struct.Struct("<i")
_ENTRY = struct.Struct("<Bi")


class InvalidFormatError(ValueError):
    """Raised when a blob is not a valid compressed stream."""


def build_tree(freq_table: Mapping[int, int]) -> HuffmanNode | None:
    """Build a Huffman tree from byte frequencies; ``None`` when there are none."""
    return HuffmanTree(freq_table).root


def code_table(root: HuffmanNode | None) -> dict[int, str]:
    """Map each leaf byte to its path; a lone leaf gets the empty code."""
    table: dict[int, str] = {}
    if root is None:
        return table
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            table[node.byte] = path
            continue
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))
    return table


def _pack_bits(bits: str) -> bytes:
    if not bits:
        return b""
    padded = bits + "0" * (-len(bits) % 8)
    return int(padded, 2).to_bytes(len(padded) // 8, "big")


def compress_bytes(data: bytes) -> bytes:
    """Compress ``data`` into the HUFF stream format."""
    freq = Counter(data)
    codes = code_table(build_tree(freq))
    parts = [MAGIC, _COUNT.pack(len(freq))]
    parts.extend(_ENTRY.pack(byte, freq[byte]) for byte in sorted(freq))
    parts.append(_pack_bits("".join(codes[byte] for byte in data)))
    return b"".join(parts)


def decompress_bytes(blob: bytes) -> bytes:
    """Restore the data held in a HUFF stream."""
    if blob[: len(MAGIC)] != MAGIC:
        raise InvalidFormatError("Invalid file format")
    pos = len(MAGIC)
    try:
        (size,) = _COUNT.unpack_from(blob, pos)
    except struct.error:
        raise InvalidFormatError("missing frequency table size") from None
    if size < 0:
        raise InvalidFormatError("negative frequency table size")
    pos += _COUNT.size

    freq: dict[int, int] = {}
    for _ in range(size):
        try:
            byte, count = _ENTRY.unpack_from(blob, pos)
        except struct.error:
            raise InvalidFormatError("frequency table is truncated") from None
        if count < 0:
            raise InvalidFormatError("negative frequency")
        freq[byte] = count
        pos += _ENTRY.size

    root = build_tree(freq)
    if root is None:
        return b""
    total = root.weight
    if root.is_leaf:
        return bytes([root.byte]) * total

    out = bytearray()
    node = root
    for byte in blob[pos:]:
        for shift in range(7, -1, -1):
            node = node.right if (byte >> shift) & 1 else node.left
            if node.is_leaf:
                out.append(node.byte)
                node = root
                if len(out) == total:
                    return bytes(out)
    raise InvalidFormatError("compressed data ended early")


def compress_file(input_file: str | Path, output_file: str | Path) -> None:
    """Compress ``input_file`` into ``output_file``."""
    Path(output_file).write_bytes(compress_bytes(Path(input_file).read_bytes()))


def decompress_file(input_file: str | Path, output_file: str | Path) -> None:
    """Decompress ``input_file`` into ``output_file``."""
    data = decompress_bytes(Path(input_file).read_bytes())
    Path(output_file).write_bytes(data)