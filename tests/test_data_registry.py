import os
import json
import pytest
from pathlib import Path
from pybtps.io.data_registry import (
    DEFAULT_TABLE_FILENAME,
    get_default_table_path,
    load_btps_table
)

# ------------------------------
# Tests for get_default_table_path

def test_get_default_table_path_points_to_data_package():
    expected = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "pybtps", "data", DEFAULT_TABLE_FILENAME)
    )
    assert Path(get_default_table_path()) == Path(expected)

def test_get_default_table_path_uses_resources(tmp_path, monkeypatch):
    expected_file = tmp_path / DEFAULT_TABLE_FILENAME
    expected_file.write_text("{}")
    monkeypatch.setattr("importlib.resources.files", lambda pkg: tmp_path)
    assert get_default_table_path() == str(expected_file)

def test_get_default_table_path_missing_in_resources(tmp_path, monkeypatch):
    monkeypatch.setattr("importlib.resources.files", lambda pkg: tmp_path)
    with pytest.raises(FileNotFoundError, match="Cannot find reference table 'btps_factors.json'"):
        get_default_table_path()

def test_get_default_table_path_missing_file():
    with pytest.raises(FileNotFoundError, match="missing.json"):
        get_default_table_path("missing.json")

# ------------------------------
# Tests for load_btps_table

def test_load_btps_table_content():
    data = load_btps_table()
    assert set(data) >= {"temperature", "factor"}
    assert len(data["temperature"]) == len(data["factor"]) == 18
    assert data["temperature"][0] == 20.0
    assert data["factor"][0] == 1.102
    assert data["temperature"][-1] == 37.0
    assert data["factor"][-1] == 1.0

def test_load_btps_table_from_custom_location(tmp_path, monkeypatch):
    custom = {"temperature": [1.0, 2.0], "factor": [3.0, 4.0]}
    (tmp_path / "custom.json").write_text(json.dumps(custom))
    monkeypatch.setattr("importlib.resources.files", lambda pkg: tmp_path)
    assert load_btps_table("custom.json") == custom
