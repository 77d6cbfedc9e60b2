import pytest

from sckit.csvfile import CsvError, CsvTable, parse_csv, read_csv


def test_simple_table():
    table = parse_csv("a,b\nc,d\n")
    assert table.rows == 2
    assert table.cols == 2
    assert table.get(0, 1) == "b"
    assert table.get(1, 0) == "c"
    assert list(table) == [("a", "b"), ("c", "d")]


def test_quoted_fields():
    table = parse_csv('"x,y","say ""hi"""\n')
    assert list(table) == [("x,y", 'say "hi"')]


def test_quoted_newline_inside_field():
    table = parse_csv('"line1\nline2",z\n')
    assert list(table) == [("line1\nline2", "z")]


def test_quoted_part_joins_surrounding_text():
    assert list(parse_csv('ab"c,d"ef\n')) == [("abc,def",)]


def test_carriage_returns_dropped():
    assert list(parse_csv("a,b\r\nc,d\r\n")) == [("a", "b"), ("c", "d")]


def test_empty_fields():
    assert list(parse_csv("a,,\n")) == [("a", "", "")]


def test_quote_closing_at_end_of_input_raises():
    with pytest.raises(CsvError):
        parse_csv('a,"b"')


def test_unterminated_quote_raises():
    with pytest.raises(CsvError):
        parse_csv('a,"b\n')


def test_uneven_fields_raise():
    with pytest.raises(CsvError):
        parse_csv("a,b\nc\n")


def test_even_total_with_ragged_lines():
    table = parse_csv("a,b,c\nd\n")
    assert table.cols == 2
    assert list(table) == [("a", "b"), ("c", "d")]


def test_trailing_unterminated_field_dropped():
    table = parse_csv("a,b\nc,d")
    assert table.rows == 1
    assert table.cols == 3
    assert list(table) == [("a", "b", "c")]


def test_empty_input_raises():
    with pytest.raises(CsvError):
        parse_csv("")


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_get_out_of_range(row, col):
    table = parse_csv("a,b\nc,d\n")
    with pytest.raises(IndexError):
        table.get(row, col)


def test_table_value():
    assert parse_csv("1,2\n") == CsvTable(1, 2, ("1", "2"))


def test_read_csv_prints_every_cell(tmp_path):
    path = tmp_path / "onetime.csv"
    path.write_bytes('id,name\r\n1,"Smith, J"\r\n2,你好\r\n'.encode("utf-8"))
    table = read_csv(path)
    cells = [
        (i, j, table.get(i, j)) for i in range(table.rows) for j in range(table.cols)
    ]
    assert cells == [
        (0, 0, "id"),
        (0, 1, "name"),
        (1, 0, "1"),
        (1, 1, "Smith, J"),
        (2, 0, "2"),
        (2, 1, "你好"),
    ]


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "absent.csv")