from collections import Counter

import pytest

from learnbench.huffman_file import (
    HuffmanTree,
    compress_file,
    decode,
    encode,
    get_file_stem,
    get_postfix,
    uncompress_file,
)


def test_postfix_is_after_first_dot():
    assert get_postfix("report.tar.gz") == "tar.gz"


def test_stem_is_before_first_dot():
    assert get_file_stem("report.tar.gz") == "report"


def test_name_without_dot_is_kept_whole():
    assert get_postfix("README") == "README"
    assert get_file_stem("README") == "README"


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"a",
        b"aaaaaaa",
        b"hello huffman world",
        b"line one\nline two\n::colons::\n",
        bytes(range(256)),
        bytes(range(256)) * 3 + b"\x00" * 100,
    ],
)
def test_encode_decode_round_trip(data):
    postfix, restored = decode(encode(data, "txt"))
    assert postfix == "txt"
    assert restored == data


def test_header_lists_counts_in_byte_order():
    blob = encode(b"aab", "txt")
    assert blob.startswith(b"txt\n2\na:2\nb:1\n")


def test_postfix_with_newline_is_rejected():
    with pytest.raises(ValueError):
        encode(b"abc", "t\nxt")


def test_codes_are_prefix_free_and_cover_all_bytes():
    data = b"abracadabra alakazam"
    codes = HuffmanTree(Counter(data)).codes()
    assert set(codes) == set(data)
    values = list(codes.values())
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            if i != j:
                assert not b.startswith(a)


def test_more_frequent_bytes_get_no_longer_codes():
    counts = Counter(b"a" * 50 + b"b" * 20 + b"c" * 5 + b"d")
    codes = HuffmanTree(counts).codes()
    ranked = sorted(counts, key=counts.get, reverse=True)
    lengths = [len(codes[byte]) for byte in ranked]
    assert lengths == sorted(lengths)


def test_sequence_counts_skip_unused_bytes():
    counts = [0] * 256
    counts[ord("x")] = 3
    counts[ord("y")] = 1
    tree = HuffmanTree(counts)
    assert set(tree.codes()) == {ord("x"), ord("y")}
    assert tree.root.weight == 4


def test_all_zero_counts_give_empty_tree():
    tree = HuffmanTree([0] * 256)
    assert tree.root is None
    assert tree.codes() == {}


def test_repetitive_data_shrinks():
    data = b"a" * 1000 + b"b" * 10
    assert len(encode(data, "x")) < len(data)


def test_truncated_body_raises():
    blob = encode(b"abcabcabcd", "t")
    with pytest.raises(ValueError):
        decode(blob[:-1])


def test_malformed_header_raises():
    with pytest.raises(ValueError):
        decode(b"txt\nxyz\n")


def test_missing_header_line_raises():
    with pytest.raises(ValueError):
        decode(b"txt")


def test_file_round_trip(tmp_path):
    source = tmp_path / "notes.txt"
    data = b"the quick brown fox\njumps over the lazy dog\n" * 20
    source.write_bytes(data)

    compressed = compress_file(str(source))
    assert compressed == tmp_path / "notes.hz.bin"
    assert compressed.read_bytes().startswith(b"txt\n")

    restored = uncompress_file(compressed)
    assert restored == tmp_path / "notesun.txt"
    assert restored.read_bytes() == data


def test_compress_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        compress_file(tmp_path / "absent.txt")