import pytest

from highscore_getter.csvreader import CsvReader, parse_csv


def test_parse_simple_rows():
    assert parse_csv("1,2,3\n4,5\n") == [["1", "2", "3"], ["4", "5"]]


def test_bom_is_skipped():
    assert parse_csv("\ufeffa,b\n") == [["a", "b"]]


def test_crlf_lines():
    assert parse_csv("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]


def test_quotes_are_removed_before_splitting():
    assert parse_csv('"a,b",c') == [["a", "b", "c"]]


def test_doubled_quote_keeps_one_and_protects_commas():
    assert parse_csv('a""b,c') == [['a"b,c']]


def test_quoted_field_spans_lines():
    assert parse_csv('"x\ny",z\nnext') == [["x\ny", "z"], ["next"]]


def test_unterminated_quote_raises():
    with pytest.raises(ValueError):
        parse_csv('"open,field')


def test_reader_access():
    reader = CsvReader.from_text("id,speed,name\n201, 42abc,slime\n")
    assert reader.lines() == 2
    assert reader.columns(1) == 3
    assert reader.get_string(1, 2) == "slime"
    assert reader.get_string(1, 10) == ""
    assert reader.get_int(1, 1) == 42


def test_reader_errors():
    reader = CsvReader.from_text("abc,1.5\n")
    with pytest.raises(IndexError):
        reader.columns(5)
    with pytest.raises(ValueError):
        reader.get_int(0, 0)
    with pytest.raises(ValueError):
        reader.get_float(0, 0)
    assert reader.get_float(0, 1) == 1.5


def test_reader_from_file(tmp_path):
    path = tmp_path / "map.csv"
    path.write_bytes(b"\xef\xbb\xbf0,1\n2,3\n")
    reader = CsvReader(path)
    assert reader.lines() == 2
    assert reader.get_int(1, 1) == 3


def test_missing_file_gives_empty_table(tmp_path):
    reader = CsvReader(tmp_path / "absent.csv")
    assert reader.lines() == 0