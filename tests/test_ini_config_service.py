# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from modprofile.services.config.ini_config_service import IniConfigService

MODULE = "modprofile.services.config.ini_config_service"


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def no_platformdirs(monkeypatch, tmp_path):
    """Force the ~/.config fallback and point HOME at an empty temp dir."""
    monkeypatch.setattr(f"{MODULE}.user_config_dir", None, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path / ".config" / IniConfigService.DEFAULT_APP_DIR / IniConfigService.DEFAULT_FILE


@pytest.fixture()
def user_cfg(monkeypatch, tmp_path):
    """Pretend platformdirs resolves the user config dir under tmp_path/usercfg."""
    monkeypatch.setattr(
        f"{MODULE}.user_config_dir", lambda appname: str(tmp_path / "usercfg"), raising=False
    )
    return tmp_path / "usercfg" / IniConfigService.DEFAULT_FILE


def test_defaults_when_no_config_files(no_platformdirs):
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None
    assert cfg.get("profile", "author", "x") == "x"
    assert cfg.get_int("editor", "tab_width", 2) == 2
    assert cfg.get_bool("editor", "wrap", False) is False
    assert isinstance(cfg.as_dict(), dict)


def test_home_fallback_used_when_platformdirs_missing(no_platformdirs):
    write_ini(no_platformdirs, "[app]\nversion = 4.5.6\n[profile]\nauthor = Spyborg\n")
    cfg = IniConfigService()
    assert cfg.app_version() == "4.5.6"
    assert cfg.get("profile", "author") == "Spyborg"
    assert cfg.loaded_from == no_platformdirs


def test_project_root_config_is_used_when_present(no_platformdirs, tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[logging]\nlevel = DEBUG\n[editor]\ntab_width = 4\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get("logging", "level") == "DEBUG"
    assert cfg.get_int("editor", "tab_width") == 4
    assert cfg.loaded_from == ini


def test_user_config_preferred_over_project_root(user_cfg, tmp_path):
    proj_root = tmp_path / "repo"
    write_ini(user_cfg, "[app]\nversion = 2.0.0\n")
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == user_cfg


def test_explicit_path_overrides_everything(user_cfg, tmp_path):
    proj_root = tmp_path / "repo"
    explicit_path = tmp_path / "explicit.ini"
    write_ini(user_cfg, "[app]\nversion = 2.0.0\n")
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")
    write_ini(explicit_path, "[app]\nversion = 9.9.9\n")

    cfg = IniConfigService(explicit_path=explicit_path, project_root=proj_root)
    assert cfg.app_version() == "9.9.9"
    assert cfg.loaded_from == explicit_path


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), ("  7  ", 7), ("two", None), ("", None)],
)
def test_get_int_parsing(no_platformdirs, raw, expected):
    write_ini(no_platformdirs, f"[editor]\nfont_size = {raw}\n")
    assert IniConfigService().get_int("editor", "font_size", None) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        (" Yes ", True),
        ("on", True),
        ("off", False),
        ("0", False),
        ("maybe", None),
    ],
)
def test_get_bool_parsing(no_platformdirs, raw, expected):
    write_ini(no_platformdirs, f"[editor]\nwrap = {raw}\n")
    assert IniConfigService().get_bool("editor", "wrap", None) is expected


def test_as_dict_snapshot(no_platformdirs):
    write_ini(no_platformdirs, "[app]\nversion = 3.1.4\n\n[editor]\ntab_width = 2\nfont_size = 13\n")
    snap = IniConfigService().as_dict()
    assert snap["app"]["version"] == "3.1.4"
    assert snap["editor"] == {"tab_width": "2", "font_size": "13"}


def test_malformed_config_is_ignored_and_defaults_used(user_cfg):
    user_cfg.parent.mkdir(parents=True, exist_ok=True)
    user_cfg.write_text("this is not INI at all", encoding="utf-8")

    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"


def test_malformed_user_config_falls_through_to_project(user_cfg, tmp_path):
    user_cfg.parent.mkdir(parents=True, exist_ok=True)
    user_cfg.write_text("garbage", encoding="utf-8")
    proj_ini = tmp_path / "repo" / "config" / "config.ini"
    write_ini(proj_ini, "[app]\nversion = 1.1.1\n")

    cfg = IniConfigService(project_root=tmp_path / "repo")
    assert cfg.loaded_from == proj_ini
    assert cfg.app_version() == "1.1.1"


def test_platformdirs_is_resolved_at_import():
    import modprofile.services.config.ini_config_service as mod
    from platformdirs import user_config_dir

    assert mod.user_config_dir is user_config_dir
