import pytest

from untitled_dm.config import CommandConfig, MenuConfig, load_config
from untitled_dm.exceptions import ConfigDecodeError


def test_load_config_missing_file_is_empty(tmp_path):
    config = load_config(tmp_path / "config.toml")
    assert config == MenuConfig()
    assert config.commands == []


def test_load_config_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'Title = "Sessions"\n'
        "\n"
        "[[Commands]]\n"
        'Name = "Shell"\n'
        'Command = "echo"\n'
        'Args = ["hi"]\n'
        "\n"
        "[[Commands]]\n"
        'Name = "Label"\n',
        encoding="UTF-8",
    )
    config = load_config(path)

    assert config.title == "Sessions"
    assert config.commands == [
        CommandConfig(name="Shell", command="echo", args=["hi"]),
        CommandConfig(name="Label", command="", args=[]),
    ]


def test_load_config_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "Commands:\n"
        "  - Name: Sway\n"
        "    Command: sway\n"
        "  - Name: Shell\n"
        "    Command: bash\n"
        "    Args: [-l]\n",
        encoding="UTF-8",
    )
    config = load_config(path)

    assert [entry.name for entry in config.commands] == ["Sway", "Shell"]
    assert config.commands[1].args == ["-l"]
    assert config.title is None


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="UTF-8")
    assert load_config(path).commands == []


def test_load_config_malformed_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[[Commands]\nName = ", encoding="UTF-8")
    with pytest.raises(ConfigDecodeError) as exc_info:
        load_config(path)
    assert exc_info.value.path == path


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- just\n- a list\n", encoding="UTF-8")
    with pytest.raises(ConfigDecodeError, match="mapping"):
        load_config(path)


def test_load_config_rejects_invalid_record(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[[Commands]]\nCommand = "echo"\n', encoding="UTF-8")
    with pytest.raises(ConfigDecodeError):
        load_config(path)


def test_load_config_leaves_error_logging_to_caller(tmp_path, caplog):
    path = tmp_path / "config.toml"
    path.write_text("[[Commands]\n", encoding="UTF-8")
    with caplog.at_level("DEBUG", logger="untitled_dm"):
        with pytest.raises(ConfigDecodeError):
            load_config(path)
    assert not [record for record in caplog.records if record.levelname == "ERROR"]
