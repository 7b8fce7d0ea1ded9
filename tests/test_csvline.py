import io

import pytest

from fitfuel.csvline import (
    MAX_FIELDS,
    MAX_LINE_LENGTH,
    parse_csv_line,
    read_csv,
    split_string,
)


def test_plain_fields():
    assert parse_csv_line("a,b,c") == ["a", "b", "c"]


def test_newline_is_removed():
    assert parse_csv_line("Arroz,130,28\n") == ["Arroz", "130", "28"]


def test_quoted_field_keeps_separator():
    assert parse_csv_line('"Pan, integral",250,3.5') == ["Pan, integral", "250", "3.5"]


def test_all_fields_quoted():
    assert parse_csv_line('"x","y","z"') == ["x", "y", "z"]


def test_unquoted_trailing_quote_dropped():
    assert parse_csv_line('ab",cd') == ["ab", "cd"]


def test_consecutive_separators_collapse():
    assert parse_csv_line("a,,b") == ["a", "b"]


def test_leading_separator_gives_empty_field():
    assert parse_csv_line(",a") == ["", "a"]


def test_empty_line():
    assert parse_csv_line("") == []
    assert parse_csv_line("\n") == []


def test_custom_separator():
    assert parse_csv_line('uno;"dos;tres";cuatro', ";") == ["uno", "dos;tres", "cuatro"]


def test_field_limit():
    line = ",".join(str(n) for n in range(MAX_FIELDS + 50))
    fields = parse_csv_line(line)
    assert len(fields) == MAX_FIELDS - 1
    assert fields[0] == "0"


@pytest.mark.parametrize("separator", ["", ",,"])
def test_bad_separator(separator):
    with pytest.raises(ValueError):
        parse_csv_line("a,b", separator)


def test_read_csv_yields_rows():
    stream = io.StringIO('nombre,kcal\n"Leche, entera",61\n')
    assert list(read_csv(stream)) == [["nombre", "kcal"], ["Leche, entera", "61"]]


def test_read_csv_splits_long_lines():
    original = "a" * 1500
    rows = list(read_csv(io.StringIO(original + "\n")))
    assert len(rows) == 2
    assert len(rows[0][0]) == MAX_LINE_LENGTH - 1
    assert rows[0][0] + rows[1][0] == original


def test_split_string_trims_spaces():
    assert split_string(" a , b ,c ", ",") == ["a", "b", "c"]


def test_split_string_any_delimiter_and_runs():
    assert split_string("a,;b;;c", ",;") == ["a", "b", "c"]


def test_split_string_empty_inputs():
    assert split_string("", ",") == []
    assert split_string(",,,", ",") == []
    assert split_string("abc", "") == ["abc"]