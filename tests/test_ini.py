import io

import pytest

from bgcsim.ini import IniError, InitFile, end_init, file_open


def make(text):
    return InitFile(io.StringIO(text), "test.ini")


def test_read_int_discards_rest_of_line():
    init = make("42 (int) some comment\n7\n")
    assert init.read_int() == 42
    assert init.read_int() == 7


def test_read_float_and_string_skip_blank_lines():
    init = make("\n\n  3.5e2 comment\n\nKEYWORD trailing text\n")
    assert init.read_float() == pytest.approx(350.0)
    assert init.read_string() == "KEYWORD"


def test_read_int_prefix_of_word():
    init = make("12abc\n")
    assert init.read_int() == 12


def test_read_int_rejects_text():
    init = make("abc\n")
    with pytest.raises(IniError):
        init.read_int()


def test_read_float_rejects_text():
    init = make("value\n")
    with pytest.raises(IniError):
        init.read_float()


def test_end_of_file_raises():
    init = make("only\n")
    assert init.read_string() == "only"
    with pytest.raises(IniError):
        init.read_string()


def test_expect_keyword():
    init = make("MET_INPUT\nOTHER\n")
    init.expect_keyword("MET_INPUT")
    with pytest.raises(IniError, match="MET_INPUT"):
        init.expect_keyword("MET_INPUT")


def test_end_init_accepts_keyword():
    init = make("END_INIT\nextra\n")
    end_init(init)
    assert init.read_string() == "extra"


def test_end_init_rejects_other_word():
    with pytest.raises(IniError, match="END_INIT"):
        end_init(make("SOMETHING\n"))


def test_end_init_rejects_empty_file():
    with pytest.raises(IniError):
        end_init(make(""))


def test_file_open_modes_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    with file_open(path, "o") as out:
        out.write("hello\n")
    with file_open(path, "i") as inp:
        assert inp.read() == "hello\n"
    with file_open(path, "r") as inp:
        assert inp.read() == b"hello\n"
    with file_open(path, "w") as out:
        out.write(b"\x00\x01")
    assert path.read_bytes() == b"\x00\x01"


def test_file_open_invalid_mode(tmp_path):
    with pytest.raises(IniError):
        file_open(tmp_path / "x", "z")


def test_file_open_missing_file(tmp_path):
    with pytest.raises(IniError):
        file_open(tmp_path / "missing.txt", "i")


def test_open_listed_file(tmp_path):
    target = tmp_path / "listed.txt"
    target.write_text("content\n")
    init = make(f"{target} (listed file)\n")
    with init.open_listed_file("i") as handle:
        assert handle.read() == "content\n"


def test_open_listed_file_without_name():
    with pytest.raises(IniError):
        make("").open_listed_file("i")