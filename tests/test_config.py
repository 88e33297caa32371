from pathlib import Path

import pytest

from backend.config import ColorsConfig, Config, LayoutConfig


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "weekplanner.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_when_default_file_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    config = Config.load()
    assert config.default_user == ""
    assert config.host_view is False
    assert config.timezone == "UTC"
    assert config.colors == ColorsConfig()
    assert config.source is None


def test_default_path_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert Config.get_default_config_path() == tmp_path / "weekplanner" / "weekplanner.toml"


def test_missing_explicit_file_is_an_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "nope.toml")


def test_reads_sections(tmp_path):
    path = write(tmp_path, """
[General]
default_user = "alice"
host_view = true
timezone = "Europe/Amsterdam"

[Layout]
text_font_size = 14
window_width = 1400

[Colors]
host_event = "#0000ff"

[Localization]
day_names = "So Mo Di Mi Do Fr Sa"

[Labels]
host_view = "Gastgeber"
""")
    config = Config.load(path)
    assert config.source == path
    assert config.default_user == "alice"
    assert config.host_view is True
    assert config.timezone == "Europe/Amsterdam"
    assert config.layout.text_font_size == 14
    assert config.layout.window_width == 1400
    assert config.layout.window_height == LayoutConfig.window_height
    assert config.colors.host_event == "#0000ff"
    assert config.colors.attendee_event == ColorsConfig.attendee_event
    assert config.localization.get_day_name(0) == "So"
    assert config.labels.host_view == "Gastgeber"


def test_unknown_timezone_rejected():
    with pytest.raises(ValueError):
        Config.from_dict({"General": {"timezone": "Mars/Olympus"}})


def test_host_view_must_be_bool():
    with pytest.raises(ValueError):
        Config.from_dict({"General": {"host_view": "yes"}})


def test_wrong_number_of_day_names_falls_back():
    config = Config.from_dict({"Localization": {"day_names": "A B C"}})
    assert config.localization.day_names[0] == "Sun"
    assert config.localization.get_day_name(7) == ""
