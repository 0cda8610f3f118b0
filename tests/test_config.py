from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4

from table_report.config import ReportConfig, load_config
from table_report.errors import ConfigurationError
from table_report.table_model import Orientation


def test_defaults():
    config = load_config()
    assert config.page_dimensions == (612, 792)
    assert config.page_orientation == Orientation.PORTRAIT
    assert config.out_dir == Path("out")


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "report.yaml"
    original = ReportConfig(page_size="A4", orientation="landscape", margin=25.0,
                            title="Trip Costs", currency="EUR", out_dir=tmp_path)
    original.to_yaml(path)
    assert load_config(path) == original


def test_partial_yaml(tmp_path):
    path = tmp_path / "report.yaml"
    path.write_text("row_height: 16\nout_dir: build\n")
    config = load_config(path)
    assert config.row_height == 16
    assert config.out_dir == Path("build")
    assert config.font_name == "Helvetica"


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "report.yaml"
    path.write_text("colour: red\n")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_unknown_page_size_and_orientation():
    with pytest.raises(ConfigurationError):
        ReportConfig(page_size="B7").page_dimensions
    with pytest.raises(ConfigurationError):
        ReportConfig(orientation="sideways").page_orientation


def test_build_table_with_equal_columns():
    config = ReportConfig(page_size="A4", orientation="landscape", margin=20)
    table = config.build_table(["A", "B"], [["1", "2"]])
    assert table.page_size == A4
    assert table.is_landscape
    assert [c.width for c in table.columns] == [(A4[1] - 40) / 2] * 2
    assert table.margin == 20


def test_build_metadata_uses_captions():
    metadata = ReportConfig(title="Trip", currency="USD").build_metadata("a", "b", 3)
    assert metadata.header_caption() == "Trip [ a - b ]"
    assert metadata.summary_caption() == "Summary is: 3 USD"
