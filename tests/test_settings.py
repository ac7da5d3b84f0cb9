import pytest

from datagen.core.settings import ConfigError, Settings


def test_load_json_layers_defaults(write_config):
    path = write_config({"rows": 1, "columns": []})
    config = Settings().load(str(path))
    assert config["delimiter"] == ","
    assert config["rows"] == 1


def test_document_overrides_defaults(write_config):
    path = write_config({"rows": 1, "delimiter": "\t", "columns": []})
    assert Settings().load(str(path))["delimiter"] == "\t"


def test_load_yaml(write_config):
    path = write_config(
        "rows: 2\n"
        "delimiter: ';'\n"
        "columns:\n"
        "  - name: id\n"
        "    type: int\n"
        "    data: {generator: sequence, seed: 1}\n",
        name="table.yaml",
    )
    config = Settings().load_document(str(path))
    assert config["delimiter"] == ";"
    assert config["columns"][0]["data"]["generator"] == "sequence"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        Settings().load(str(tmp_path / "missing.json"))


def test_malformed_json(write_config):
    path = write_config('{"rows": 2, "columns": [')
    with pytest.raises(ConfigError, match="Malformed"):
        Settings().load(str(path))


def test_top_level_must_be_mapping(write_config):
    path = write_config("[1, 2, 3]")
    with pytest.raises(ConfigError, match="mapping"):
        Settings().load(str(path))


def test_merge_configs_is_recursive():
    base = {"a": {"x": 1, "y": 2}, "b": 1}
    merged = Settings.merge_configs(base, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}
    assert base["a"]["y"] == 2


def test_invalid_utf8_is_config_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(ConfigError, match="Malformed"):
        Settings().load(str(path))


def test_unreadable_file_is_config_error(write_config, monkeypatch):
    path = write_config({"rows": 1, "columns": []})

    def deny(self, path):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Settings, "_read_json", deny)
    with pytest.raises(ConfigError, match="Cannot read"):
        Settings().load(str(path))
