import json

import pytest

from coltypes.cli import cli, validate_columns
from coltypes.core.exceptions import ColumnSpecError


def _write(tmp_path, document, name="columns.json"):
    path = tmp_path / name
    path.write_text(json.dumps(document))
    return str(path)


def test_validate_columns_returns_loaded_columns(tmp_path):
    path = _write(
        tmp_path,
        [
            {"attribute_name": "Id", "data_type": "Integer", "is_identity": True},
            {"attribute_name": "Location", "data_type": "Geography"},
        ],
    )
    columns = validate_columns(path)
    assert [str(c.data_type) for c in columns] == ["Integer", "Geography"]


def test_validate_columns_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_columns(str(tmp_path / "missing.json"))


def test_validate_columns_requires_list(tmp_path):
    path = _write(tmp_path, {"attribute_name": "Id"})
    with pytest.raises(ValueError, match="Expected a JSON list"):
        validate_columns(path)


def test_validate_columns_propagates_column_errors(tmp_path):
    path = _write(tmp_path, [{"attribute_name": "Id"}, {"attribute_name": "id"}])
    with pytest.raises(ColumnSpecError):
        validate_columns(path)


def test_cli_validate_exit_codes(tmp_path):
    good = _write(tmp_path, [{"attribute_name": "Title", "data_type": "VarChar"}], "good.json")
    bad = _write(tmp_path, [{"attribute_name": "Title", "data_type": "Text", "data_length": 5}], "bad.json")
    assert cli(["validate", good]) == 0
    assert cli(["validate", bad]) == 1


def test_cli_types_lists_predefined_labels(capsys):
    assert cli(["types"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert ["Boolean", "DateTime", "Decimal", "Integer", "Text", "VarChar"] == [
        line for line in lines if "|" not in line
    ]
