import platformdirs
import pytest

from rtop.config import Config, ConfigError, LayoutConfig


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    config_home = tmp_path / "config_home"
    config_home.mkdir()
    monkeypatch.setattr(platformdirs, "user_config_path", lambda *a, **k: config_home)
    monkeypatch.chdir(tmp_path)
    return config_home


def test_defaults():
    config = Config()
    assert config.update_interval == 1000
    assert config.theme == "default"
    assert config.sort_by == "cpu"
    assert config.filters == []
    assert config.layout == LayoutConfig()
    assert config.layout.show_cpu and config.layout.show_process_details


def test_dict_round_trip():
    config = Config(
        update_interval=250,
        theme="dark",
        layout=LayoutConfig(show_disk=False),
        sort_by="memory",
        filters=["firefox", "bash"],
    )
    assert Config.from_dict(config.to_dict()) == config


def test_from_dict_missing_field():
    data = Config().to_dict()
    del data["sort_by"]
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_from_dict_missing_layout_field():
    data = Config().to_dict()
    del data["layout"]["show_cpu"]
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_from_dict_rejects_negative_interval():
    data = Config().to_dict()
    data["update_interval"] = -1
    with pytest.raises(ConfigError):
        Config.from_dict(data)


def test_from_dict_ignores_unknown_fields():
    data = Config().to_dict()
    data["extra"] = "ignored"
    assert Config.from_dict(data) == Config()


def test_save_and_load_round_trip(isolated, tmp_path):
    config = Config(theme="light", sort_by="memory", filters=["x"])
    target = tmp_path / "my.toml"
    config.save(target)
    assert Config.load(str(target)) == config


def test_load_none_returns_default(isolated):
    assert Config.load(None) == Config()


def test_load_missing_path_returns_default(isolated, tmp_path):
    assert Config.load(str(tmp_path / "absent.toml")) == Config()


def test_load_invalid_toml_reports_and_falls_back(isolated, tmp_path, capsys):
    target = tmp_path / "bad.toml"
    target.write_text("this is = = not toml", encoding="utf-8")
    assert Config.load(target) == Config()
    assert "Error parsing config file" in capsys.readouterr().err


def test_load_from_user_config_dir(isolated):
    (isolated / "rtop").mkdir()
    expected = Config(theme="dark", update_interval=500)
    expected.save(isolated / "rtop" / "config.toml")
    assert Config.load(None) == expected


def test_user_config_dir_bad_toml_is_silent(isolated, capsys):
    (isolated / "rtop").mkdir()
    (isolated / "rtop" / "config.toml").write_text("[[[", encoding="utf-8")
    assert Config.load(None) == Config()
    assert capsys.readouterr().err == ""


def test_yaml_in_user_config_dir_is_not_parsed(isolated):
    (isolated / "rtop").mkdir()
    (isolated / "rtop" / "config.yaml").write_text("theme: dark\n", encoding="utf-8")
    assert Config.load(None) == Config()


def test_pkg_fallback_message(isolated, tmp_path, capsys):
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "config.yaml").write_text("theme: dark\n", encoding="utf-8")
    assert Config.load(None) == Config()
    assert "Using pkg/config.yaml as fallback" in capsys.readouterr().err