import pytest

from learnbench.file_stream import (
    read_binary_person,
    read_words,
    save_binary_person,
    save_text_profile,
)


def test_text_profile_content(tmp_path):
    target = tmp_path / "test1.txt"
    save_text_profile(target)
    assert target.read_text(encoding="utf-8") == "姓名:张三\n性别:男\n年龄:18\n"


def test_text_profile_words(tmp_path):
    target = tmp_path / "test1.txt"
    save_text_profile(target)
    assert read_words(target) == ["姓名:张三", "性别:男", "年龄:18"]


def test_binary_person_round_trip(tmp_path):
    target = tmp_path / "person.txt"
    save_binary_person(target, "张三", 18)
    assert read_binary_person(target) == ("张三", 18)


def test_binary_record_has_fixed_size(tmp_path):
    target = tmp_path / "person.bin"
    save_binary_person(target, "Tom", 40)
    assert len(target.read_bytes()) == 68


def test_binary_name_is_nul_padded(tmp_path):
    target = tmp_path / "person.bin"
    save_binary_person(target, "Tom", 40)
    assert target.read_bytes().startswith(b"Tom\x00")


def test_too_long_name_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_binary_person(tmp_path / "p.bin", "x" * 64, 1)


def test_out_of_range_age_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_binary_person(tmp_path / "p.bin", "Tom", 2**40)


def test_short_binary_file_is_rejected(tmp_path):
    target = tmp_path / "short.bin"
    target.write_bytes(b"abc")
    with pytest.raises(ValueError):
        read_binary_person(target)


def test_missing_files_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "testEmpty.txt")
    with pytest.raises(FileNotFoundError):
        read_binary_person(tmp_path / "person.txt")


def test_empty_file_has_no_words(tmp_path):
    target = tmp_path / "testEmpty.txt"
    target.write_text("", encoding="utf-8")
    assert read_words(target) == []


def test_words_split_on_any_whitespace(tmp_path):
    target = tmp_path / "words.txt"
    target.write_text("  alpha\tbeta\n\ngamma  ", encoding="utf-8")
    assert read_words(target) == ["alpha", "beta", "gamma"]