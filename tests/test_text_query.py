import io

from learnbench.text_query import TextQuery, format_result

TEXT = "the cat sat\non the mat\nthe end\n"


def make_query():
    return TextQuery(io.StringIO(TEXT))


def test_query_lines_sorted_and_unique():
    result = make_query().query("the")
    assert result.lines == (0, 1, 2)
    assert result.sought == "the"


def test_query_missing_word():
    result = make_query().query("dog")
    assert result.lines == ()


def test_repeated_word_on_one_line_counted_once():
    result = TextQuery(["a a a", "b a"]).query("a")
    assert result.lines == (0, 1)


def test_file_lines_kept_without_newlines():
    result = make_query().query("mat")
    assert result.file == ("the cat sat", "on the mat", "the end")
    assert all(result.file[n].split().count("mat") for n in result.lines)


def test_format_result():
    out = format_result(make_query().query("cat"))
    assert out == "cat occors 1  times \n \t(line 1)the cat sat\n"


def test_format_missing_word_has_only_header():
    out = format_result(make_query().query("dog"))
    assert out.splitlines() == ["dog occors 0  times "]


def test_query_is_case_sensitive():
    assert TextQuery(["The the"]).query("The").lines == (0,)
    assert TextQuery(["the"]).query("The").lines == ()