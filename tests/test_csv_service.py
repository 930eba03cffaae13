import pytest
from services.csv_service import CSVService, LoadError, parse_number


def write(tmp_path, text, name="data.csv"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return str(path)


def test_read_csv_columns_match_headers(tmp_path):
    data = CSVService.read_csv(write(tmp_path, "A,B,C\n1,2,3\n4,5,6\n"))
    assert data.headers == ["A", "B", "C"]
    assert len(data.columns) == 3
    assert data.columns == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]


def test_read_csv_empty_file_raises(tmp_path):
    with pytest.raises(LoadError) as info:
        CSVService.read_csv(write(tmp_path, ""))
    assert info.value.kind == LoadError.EMPTY_INPUT


def test_read_csv_single_newline_is_one_empty_header(tmp_path):
    data = CSVService.read_csv(write(tmp_path, "\n"))
    assert data.headers == [""]
    assert data.columns == [[]]


def test_read_csv_header_only(tmp_path):
    data = CSVService.read_csv(write(tmp_path, "x,y"))
    assert data.headers == ["x", "y"]
    assert data.columns == [[], []]


def test_read_csv_drops_non_numeric_fields(tmp_path):
    data = CSVService.read_csv(write(tmp_path, "A\n1\ntext\n4\n"))
    assert data.columns == [[1.0, 4.0]]


def test_read_csv_ragged_rows(tmp_path):
    data = CSVService.read_csv(write(tmp_path, "A,B\n1\n2,3,99,100\n,5\n"))
    assert data.columns == [[1.0, 2.0], [3.0, 5.0]]


def test_read_csv_keeps_headers_verbatim(tmp_path):
    data = CSVService.read_csv(write(tmp_path, " a ,,a\n1,2,3\n"))
    assert data.headers == [" a ", "", "a"]


def test_read_csv_crlf_and_bom(tmp_path):
    path = tmp_path / "win.csv"
    path.write_bytes(b"\xef\xbb\xbfA,B\r\n1,2\r\n3,4\r\n")
    data = CSVService.read_csv(str(path))
    assert data.headers == ["A", "B"]
    assert data.columns == [[1.0, 3.0], [2.0, 4.0]]


def test_read_csv_latin1_fallback(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("Tensión,Año\n1,2\n".encode("latin-1"))
    data = CSVService.read_csv(str(path))
    assert data.headers == ["Tensión", "Año"]
    assert data.columns == [[1.0], [2.0]]


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(LoadError) as info:
        CSVService.read_csv(str(tmp_path / "nope.csv"))
    assert info.value.kind == LoadError.READ_ERROR


def test_quoted_comma_is_split(tmp_path):
    data = CSVService.read_csv(write(tmp_path, "A,B\n\"1,5\",2\n"))
    # '"1' y '5"' no son números
    assert data.columns == [[], []]


@pytest.mark.parametrize("field,expected", [
    ("1", 1.0),
    ("-2.5", -2.5),
    ("+3", 3.0),
    ("4.", 4.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("2.5E-2", 0.025),
    (" 7 ", 7.0),
])
def test_parse_number_accepts(field, expected):
    ok, value = parse_number(field)
    assert ok
    assert value == pytest.approx(expected)


@pytest.mark.parametrize("field", [
    "", "text", "1,5", "1_000", "nan", "NaN", "inf", "-Infinity",
    "1e999", "0x10", "1.2.3", "e5", ".", "--1", "١٢",
])
def test_parse_number_rejects(field):
    ok, _ = parse_number(field)
    assert not ok
