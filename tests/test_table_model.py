import pytest

from table_report.errors import ConfigurationError, DataError, RowColumnMismatchError
from table_report.table_model import Column, ReportMetadata, Table


def columns():
    return [Column("Date", 80), Column("Item", 200), Column("Amount", 60)]


def test_table_properties():
    table = Table(columns=columns(), rows=[["a", "b", "c"]])
    assert table.width == 340
    assert table.column_names == ["Date", "Item", "Amount"]
    assert table.number_of_rows == 1
    assert table.number_of_columns == 3
    assert not table.is_landscape


def test_validate_accepts_valid_table():
    Table(columns=columns(), rows=[["a", None, "c"]]).validate()


def test_validate_rejects_row_mismatch():
    table = Table(columns=columns(), rows=[["a", "b", "c"], ["a", "b", "c", "d"]])
    with pytest.raises(RowColumnMismatchError) as excinfo:
        table.validate()
    assert isinstance(excinfo.value, DataError)
    assert excinfo.value.row_index == 1


@pytest.mark.parametrize("kwargs", [
    {"row_height": 0},
    {"margin": -1},
    {"cell_margin": -0.5},
    {"font_size": 0},
])
def test_validate_rejects_bad_settings(kwargs):
    with pytest.raises(ConfigurationError):
        Table(columns=columns(), **kwargs).validate()


def test_validate_rejects_bad_columns():
    with pytest.raises(ConfigurationError):
        Table(columns=[]).validate()
    with pytest.raises(ConfigurationError):
        Table(columns=[Column("A", 0)]).validate()


def test_from_records_fills_missing_keys():
    table = Table.from_records(
        columns(),
        [{"Date": "2025-01-01", "Amount": 12.5}, {"Item": "Bus"}],
        margin=20,
    )
    assert table.rows == [["2025-01-01", None, "12.5"], [None, "Bus", None]]
    assert table.margin == 20


def test_report_captions():
    metadata = ReportMetadata("01/01/2025", "31/01/2025", 450.5)
    assert metadata.header_caption() == "Expenses Report [ 01/01/2025 - 31/01/2025 ]"
    assert metadata.summary_caption() == "Summary is: 450.5 ILS"
