import pytest

from griddbscan.fileio import (
    count_entry,
    format_value,
    is_generic_header,
    read_doubles,
    read_header,
    read_int_array,
    split_words,
    write_array,
    write_int_array,
)


def test_split_words_on_all_separators():
    assert split_words("a, b\tc\r\n\nd\x00e") == ["a", "b", "c", "d", "e"]


def test_split_words_empty_text():
    assert split_words(" ,\n") == []


def test_format_int_and_tuple():
    assert format_value(-7) == "-7"
    assert format_value((3, 4)) == "3 4"


def test_format_float_uses_eleven_decimals():
    assert format_value(1.5) == "1.50000000000e+00"


def test_format_float_round_trips():
    text = format_value(0.125)
    assert float(text) == 0.125


def test_write_array_layout(tmp_path):
    path = tmp_path / "out.txt"
    write_array(path, "cluster-id", [0, -1, 2])
    assert path.read_text() == "cluster-id\n0\n-1\n2\n"


def test_int_array_round_trip(tmp_path):
    path = tmp_path / "ints.txt"
    values = [5, -3, 0, 12345]
    write_int_array(path, values)
    assert read_int_array(path) == values


def test_int_array_file_starts_with_header(tmp_path):
    path = tmp_path / "ints.txt"
    write_int_array(path, [1])
    assert path.read_text().splitlines()[0] == "sequenceInt"


def test_read_int_array_rejects_bad_header(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("cluster-id\n1\n2\n")
    with pytest.raises(ValueError):
        read_int_array(path)


def test_read_int_array_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        read_int_array(path)


def test_is_generic_header():
    assert is_generic_header("x y")
    assert not is_generic_header("1.0 -2e5;3,4")


def test_count_entry_ignores_trailing_delimiters():
    assert count_entry("1 2 3\n") == 3
    assert count_entry("1,2,3,, ") == 3


def test_read_header_without_header_line(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("1 2 3\n4 5 6\n")
    assert read_header(path) == 3


def test_read_header_skips_header_line(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("points\n1 2\n3 4\n")
    assert read_header(path) == 2


def test_read_header_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_header(tmp_path / "missing.txt")


def test_read_doubles_with_header(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("points\n1 2\n3 4\n")
    assert read_doubles(path, 2) == [(1.0, 2.0), (3.0, 4.0)]


def test_read_doubles_without_header_drops_partial_point(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0.5,1.5\n2.5,3.5\n9\n")
    assert read_doubles(path, 2) == [(0.5, 1.5), (2.5, 3.5)]


def test_read_doubles_round_trips_formatted_floats(tmp_path):
    path = tmp_path / "points.txt"
    values = [0.25, -1.75, 3.0, 1e-3]
    path.write_text("\n".join(format_value(v) for v in values))
    rows = read_doubles(path, 2)
    assert [v for row in rows for v in row] == values


def test_read_doubles_rejects_zero_dimension(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("1 2\n")
    with pytest.raises(ValueError):
        read_doubles(path, 0)