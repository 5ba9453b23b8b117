import pytest

from fhashkit.hyperbuffer import HyperTextBuffer
from fhashkit.results import (
    ResultData,
    ResultState,
    ResultView,
    append_file_error,
    append_file_hash,
    append_file_meta,
    append_file_name,
    append_find_report,
    append_result,
    find_results,
)
from fhashkit.strings import BASE_LANG, StringsManager, register_strings_for_lang
from fhashkit.uistrings import BaseStrings


@pytest.fixture(autouse=True)
def english_strings():
    StringsManager.reset_instance()
    register_strings_for_lang(BASE_LANG, BaseStrings())
    yield
    StringsManager.reset_instance()


def _full(path="C:\\data\\a.bin"):
    return ResultData(
        path=path,
        state=ResultState.ALL,
        size=1024,
        modified_date="2020-01-02 03:04",
        md5="AbCd",
        sha1="Ef01",
        sha256="2345",
        sha512="6789",
    )


def test_file_name_line():
    buf = HyperTextBuffer()
    append_file_name(_full(), buf)
    assert buf.text() == "Name: C:\\data\\a.bin\r\n"


def test_file_meta_without_version():
    buf = HyperTextBuffer()
    append_file_meta(_full(), buf)
    assert buf.text() == (
        "File Size: 1024 Byte(s)\r\nModified Date: 2020-01-02 03:04\r\n"
    )


def test_file_meta_with_version():
    buf = HyperTextBuffer()
    result = _full()
    result.version = "3.0.2.0"
    append_file_meta(result, buf)
    assert buf.text().endswith("\r\nVersion: 3.0.2.0\r\n")


def test_file_hash_lowercase_and_links():
    buf = HyperTextBuffer()
    append_file_hash(_full(), False, buf)
    assert buf.text() == (
        "MD5: abcd\r\nSHA1: ef01\r\nSHA256: 2345\r\nSHA512: 6789\r\n\r\n"
    )
    assert buf.links() == ["abcd", "ef01", "2345", "6789"]


def test_file_hash_uppercase():
    buf = HyperTextBuffer()
    append_file_hash(_full(), True, buf)
    assert buf.links()[:2] == ["ABCD", "EF01"]


def test_file_error():
    buf = HyperTextBuffer()
    append_file_error(ResultData(error="File is missing."), buf)
    assert buf.text() == "File is missing.\r\n\r\n"


def test_append_result_none_writes_nothing():
    buf = HyperTextBuffer()
    append_result(ResultData(path="x", state=ResultState.NONE), False, buf)
    assert buf.text() == ""


def test_append_result_path_only():
    buf = HyperTextBuffer()
    append_result(ResultData(path="x", state=ResultState.PATH), False, buf)
    assert buf.text() == "Name: x\r\n\r\n"


def test_append_result_error():
    buf = HyperTextBuffer()
    append_result(
        ResultData(path="x", state=ResultState.ERROR, error="Cannot open this file."),
        False,
        buf,
    )
    assert buf.text() == "Name: x\r\nCannot open this file.\r\n\r\n"


def test_append_result_all_is_concatenation():
    result = _full()
    parts = HyperTextBuffer()
    append_file_name(result, parts)
    append_file_meta(result, parts)
    append_file_hash(result, True, parts)
    whole = HyperTextBuffer()
    append_result(result, True, whole)
    assert whole.text() == parts.text()
    assert whole.links() == parts.links()


def test_append_result_meta_ends_with_blank_line():
    result = _full()
    result.state = ResultState.META
    buf = HyperTextBuffer()
    append_result(result, False, buf)
    assert buf.text().endswith("03:04\r\n\r\n")
    assert buf.links() == []


def test_find_results_matches_hash_case_insensitive():
    a = _full("C:\\Data\\A.bin")
    b = _full("C:\\other\\b.bin")
    b.md5 = "FFFF"
    b.sha1 = b.sha256 = b.sha512 = "0000"
    assert find_results([a, b], "", "abcd") == [a]
    assert find_results([a, b], "OTHER", "ffff") == [b]
    assert find_results([a, b], "missing", "abcd") == []


def test_find_report_no_result():
    buf = HyperTextBuffer()
    matches = append_find_report([_full()], "", "zzzz", False, buf)
    assert matches == []
    assert buf.text() == (
        "Verify\r\nHash: zzzz\r\n\r\nResult:\r\n\r\nNothing found"
    )


def test_find_report_with_match():
    buf = HyperTextBuffer()
    result = _full()
    matches = append_find_report([result], "", "2345", False, buf)
    assert matches == [result]
    assert "Nothing found" not in buf.text()
    assert buf.text().startswith("Verify\r\nHash: 2345\r\n\r\nResult:\r\n\r\nName: ")


def test_view_preparing_clears_initial_info():
    buf = HyperTextBuffer()
    buf.append_text("Drag files here or click open to start calculate.")
    view = ResultView(buf)
    view.preparing_calc()
    assert buf.text() == "Prepare to start calculation.\r\n"
    view.remove_preparing_calc()
    assert buf.text() == ""


def test_view_preparing_round_trip_keeps_links():
    buf = HyperTextBuffer()
    append_result(_full(), False, buf)
    before_text = buf.text()
    before_offsets = buf.link_offsets()
    view = ResultView(buf)
    view.preparing_calc()
    assert buf.text() == before_text + "Prepare to start calculation.\r\n"
    view.remove_preparing_calc()
    assert buf.text() == before_text
    assert buf.link_offsets() == before_offsets


def test_view_show_methods_and_prog_max():
    buf = HyperTextBuffer()
    view = ResultView(buf)
    result = _full()
    view.show_file_name(result)
    view.show_file_meta(result)
    view.show_file_hash(result, False)
    expected = HyperTextBuffer()
    append_result(result, False, expected)
    assert buf.text() == expected.text()
    assert view.prog_max() == 100
    view.show_file_error(ResultData(error="oops"))
    assert buf.text().endswith("oops\r\n\r\n")