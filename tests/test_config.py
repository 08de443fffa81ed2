import os
import tomllib

import platformdirs
import pytest

from openisl.config import Config, GeneralConfig, GitConfig, TuiConfig, config_path


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    config_dir = tmp_path / "cfg" / "openisl"
    monkeypatch.setattr(platformdirs, "user_config_path", lambda *a, **k: config_dir)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.upper().startswith("OPENISL_"):
            monkeypatch.delenv(key)
    return tmp_path


def test_default_config():
    config = Config()
    assert config.general.max_commits == 100
    assert config.tui.theme == "dark"
    assert config.git.auto_fetch is False


def test_default_values_of_sections():
    assert GeneralConfig().date_format == "%Y-%m-%d %H:%M:%S UTC"
    assert TuiConfig().page_size == 20
    assert GitConfig().fetch_remotes is False


def test_config_serde_roundtrip():
    config = Config()
    decoded = Config.from_toml(config.to_toml())
    assert decoded.general.max_commits == config.general.max_commits
    assert decoded == config


def test_to_toml_has_sections():
    data = tomllib.loads(Config().to_toml())
    assert data["general"]["max_commits"] == 100
    assert data["tui"]["theme"] == "dark"
    assert data["git"] == {"auto_fetch": False, "fetch_remotes": False}


def test_from_toml_missing_section():
    text = '[general]\nmax_commits = 1\ndate_format = "x"\nverbose = false\n'
    with pytest.raises(ValueError):
        Config.from_toml(text)


def test_from_toml_missing_field():
    text = Config().to_toml().replace("page_size = 20\n", "")
    with pytest.raises(ValueError):
        Config.from_toml(text)


def test_from_toml_wrong_type():
    text = Config().to_toml().replace("max_commits = 100", 'max_commits = "many"')
    with pytest.raises(ValueError):
        Config.from_toml(text)


def test_config_path_points_to_toml_file(isolated):
    assert config_path() == isolated / "cfg" / "openisl" / "config.toml"


def test_save_then_load(isolated):
    config = Config()
    config.tui.theme = "light"
    config.general.max_commits = 7
    config.save()
    assert config_path().exists()
    loaded = Config.load()
    assert loaded.tui.theme == "light"
    assert loaded.general.max_commits == 7


def test_load_without_sources_fails(isolated):
    with pytest.raises(ValueError):
        Config.load()


def test_environment_overrides_local_file(isolated, monkeypatch):
    (isolated / "work" / "openisl.toml").write_text(Config().to_toml(), encoding="utf-8")
    monkeypatch.setenv("OPENISL_TUI_THEME", "light")
    monkeypatch.setenv("OPENISL_GENERAL_VERBOSE", "true")
    loaded = Config.load()
    assert loaded.tui.theme == "light"
    assert loaded.general.verbose is True


def test_user_file_overrides_environment(isolated, monkeypatch):
    Config().save()
    monkeypatch.setenv("OPENISL_TUI_THEME", "light")
    assert Config.load().tui.theme == "dark"