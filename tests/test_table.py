import polars as pl
import pytest

from datagen.core.generator import RandomTextGenerator, SequenceGenerator
from datagen.core.random import Randomizer
from datagen.core.table import ColumnSpec, TableSpec


def make_table(delimiter=","):
    table = TableSpec()
    table.set_delimiter(delimiter)
    table.add_column(ColumnSpec("id", "int", SequenceGenerator(1)))
    table.add_column(ColumnSpec("code", "string",
                                RandomTextGenerator("fixed", 4, Randomizer(seed=11))))
    table.add_column(ColumnSpec("notes", "text"))
    return table


def test_column_describe():
    col = ColumnSpec("id", "int")
    assert col.describe() == "id(int)"
    col.attach_generator(SequenceGenerator(0))
    assert col.describe() == "id(int)<sequence>"


def test_column_without_generator_is_blank():
    col = ColumnSpec("notes", "text")
    assert col.generator is None
    assert [col.produce_next() for _ in range(3)] == ["", "", ""]


def test_attach_replaces_previous_generator():
    col = ColumnSpec("id", "int", SequenceGenerator(100))
    col.attach_generator(SequenceGenerator(1))
    assert col.produce_next() == "1"


def test_column_name_required():
    with pytest.raises(ValueError):
        ColumnSpec("", "int")


def test_default_delimiter_is_comma():
    assert TableSpec().delimiter == ","


def test_header_and_rows_line_up():
    table = make_table("|")
    assert table.header() == "id|code|notes"

    for i, row in enumerate(table.rows(10)):
        fields = row.split("|")
        assert len(fields) == 3
        assert fields[0] == str(1 + i)
        assert len(fields[1]) == 4
        assert fields[2] == ""


def test_multi_char_delimiter_between_fields_only():
    table = TableSpec()
    table.set_delimiter("::")
    table.add_column(ColumnSpec("a", "int", SequenceGenerator(0)))
    table.add_column(ColumnSpec("b", "int", SequenceGenerator(10)))
    assert table.header() == "a::b"
    assert table.next_row() == "0::10"


def test_single_column_has_no_delimiter():
    table = TableSpec()
    table.add_column(ColumnSpec("id", "int", SequenceGenerator(5)))
    assert table.header() == "id"
    assert list(table.rows(2)) == ["5", "6"]


def test_rows_non_positive_yields_nothing():
    table = make_table()
    assert list(table.rows(0)) == []
    assert list(table.rows(-3)) == []


def test_table_describe():
    table = make_table()
    assert table.describe() == (
        "{id(int)<sequence>}\n"
        "{code(string)<random-text>}\n"
        "{notes(text)}\n"
    )


def test_to_frame_keeps_column_order_and_state():
    table = make_table()
    df = table.to_frame(5)
    assert df.columns == ["id", "code", "notes"]
    assert df.height == 5
    assert df.schema["id"] == pl.String
    assert df["id"].to_list() == ["1", "2", "3", "4", "5"]
    # Generators keep advancing after materialization
    assert table.next_row().split(",")[0] == "6"


def test_to_frame_rejects_duplicate_names():
    table = TableSpec()
    table.add_column(ColumnSpec("x", "int"))
    table.add_column(ColumnSpec("x", "int"))
    with pytest.raises(ValueError):
        table.to_frame(1)
