"""Huffman file compression with a self-describing text header.

The compressed layout is::

    <postfix>\\n
    <number of distinct bytes>\\n
    <byte>:<count>\\n        (one line per byte that occurs, in byte order)
    <packed code bits, most significant bit first, zero padded>
"""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

COMPRESSED_SUFFIX = ".hz.bin"
RESTORED_MARK = "un"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry the byte they stand for."""

    weight: int
    byte: int | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree:
    """Huffman tree over byte counts; bytes that never occur are left out."""

    def __init__(self, counts: Mapping[int, int] | Sequence[int]):
        items = counts.items() if isinstance(counts, Mapping) else enumerate(counts)
        order = itertools.count()
        heap = [
            (count, next(order), HuffmanNode(count, byte))
            for byte, count in sorted(items)
            if count
        ]
        heapq.heapify(heap)
        while len(heap) > 1:
            # The lighter subtree goes to the left, the heavier to the right.
            weight_a, _, smaller = heapq.heappop(heap)
            weight_b, _, larger = heapq.heappop(heap)
            total = weight_a + weight_b
            heapq.heappush(heap, (total, next(order), HuffmanNode(total, None, smaller, larger)))
        self.root: HuffmanNode | None = heap[0][2] if heap else None

    def codes(self) -> dict[int, str]:
        """Map each byte in the tree to its code, '0' for left and '1' for right."""
        if self.root is None:
            return {}
        if self.root.is_leaf:
            return {self.root.byte: "0"}
        result: dict[int, str] = {}
        stack = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_leaf:
                result[node.byte] = path
                continue
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
        return result


def get_postfix(file_name: str) -> str:
    """Return everything after the first dot, or the whole name if there is none."""
    return file_name[file_name.find(".") + 1:]


def get_file_stem(file_name: str) -> str:
    """Return everything before the first dot, or the whole name if there is none."""
    dot = file_name.find(".")
    return file_name if dot < 0 else file_name[:dot]


def _pack_bits(bits: str) -> bytes:
    if not bits:
        return b""
    padded = bits + "0" * (-len(bits) % 8)
    return int(padded, 2).to_bytes(len(padded) // 8, "big")


def _read_line(blob: bytes, pos: int) -> tuple[bytes, int]:
    end = blob.find(b"\n", pos)
    if end < 0:
        raise ValueError("compressed header is incomplete")
    return blob[pos:end], end + 1


def encode(data: bytes, postfix: str) -> bytes:
    """Compress ``data``, recording ``postfix`` for the restored file name."""
    raw_postfix = postfix.encode("utf-8", "surrogateescape")
    if b"\n" in raw_postfix:
        raise ValueError("postfix must not contain a newline")
    counts = Counter(data)
    codes = HuffmanTree(counts).codes()
    header = [raw_postfix + b"\n", f"{len(counts)}\n".encode()]
    header.extend(bytes([byte]) + f":{counts[byte]}\n".encode() for byte in sorted(counts))
    bits = "".join(codes[byte] for byte in data)
    return b"".join(header) + _pack_bits(bits)


def decode(blob: bytes) -> tuple[str, bytes]:
    """Restore ``(postfix, data)`` from a blob made by :func:`encode`."""
    raw_postfix, pos = _read_line(blob, 0)
    kinds_line, pos = _read_line(blob, pos)
    try:
        kinds = int(kinds_line)
    except ValueError:
        raise ValueError("compressed header has no symbol count") from None

    counts: dict[int, int] = {}
    for _ in range(kinds):
        line, pos = _read_line(blob, pos)
        if not line:
            # The newline byte itself: its entry spans two lines.
            rest, pos = _read_line(blob, pos)
            line = b"\n" + rest
        if len(line) < 3 or line[1:2] != b":":
            raise ValueError("malformed frequency entry in header")
        try:
            counts[line[0]] = int(line[2:])
        except ValueError:
            raise ValueError("malformed frequency entry in header") from None

    postfix = raw_postfix.decode("utf-8", "surrogateescape")
    root = HuffmanTree(counts).root
    if root is None:
        return postfix, b""
    total = root.weight
    if root.is_leaf:
        return postfix, bytes([root.byte]) * total

    out = bytearray()
    node = root
    for byte in blob[pos:]:
        for shift in range(7, -1, -1):
            node = node.right if (byte >> shift) & 1 else node.left
            if node.is_leaf:
                out.append(node.byte)
                node = root
                if len(out) == total:
                    return postfix, bytes(out)
    raise ValueError("compressed data ended early")


def compress_file(file_name: str | Path) -> Path:
    """Compress a file next to itself as ``<stem>.hz.bin``; return that path."""
    source = Path(file_name)
    data = source.read_bytes()
    target = source.with_name(get_file_stem(source.name) + COMPRESSED_SUFFIX)
    target.write_bytes(encode(data, get_postfix(source.name)))
    return target


def uncompress_file(file_name: str | Path) -> Path:
    """Restore a compressed file as ``<stem>un.<postfix>``; return that path."""
    source = Path(file_name)
    postfix, data = decode(source.read_bytes())
    target = source.with_name(f"{get_file_stem(source.name)}{RESTORED_MARK}.{postfix}")
    target.write_bytes(data)
    return target