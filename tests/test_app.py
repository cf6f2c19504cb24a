from __future__ import annotations

import logging
from pathlib import Path

import modprofile.app as app_mod


class FakeQApplication:
    org_name: str | None = None
    app_name: str | None = None
    version: str | None = None

    def __init__(self, argv: list[str]) -> None:
        self.argv = list(argv)
        self.exec_called = 0

    @classmethod
    def setOrganizationName(cls, name: str) -> None:
        cls.org_name = name

    @classmethod
    def setApplicationName(cls, name: str) -> None:
        cls.app_name = name

    @classmethod
    def setApplicationVersion(cls, version: str) -> None:
        cls.version = version

    def exec(self) -> int:
        self.exec_called += 1
        return 0


class FakeDialog:
    def __init__(self) -> None:
        self.shown = False

    def show(self) -> None:
        self.shown = True


class FakeContainer:
    def __init__(self) -> None:
        self.dialog = FakeDialog()
        self.start_path = "unset"

    def build_profile_editor(self, *, start_path=None, parent=None):
        self.start_path = start_path
        return self.dialog


class FakeConfig:
    loaded_from = None

    def log_level(self) -> int:
        return logging.INFO

    def get_version(self) -> str:
        return "1.2.3"


def _patch(monkeypatch, container: FakeContainer) -> None:
    monkeypatch.setattr(app_mod, "QApplication", FakeQApplication)
    monkeypatch.setattr(app_mod, "build_app_config", lambda: FakeConfig())
    monkeypatch.setattr(app_mod, "configure_logging", lambda cfg: None)
    monkeypatch.setattr(app_mod.Container, "default", staticmethod(lambda config=None: container))


def test_run_app_shows_editor_without_file(monkeypatch):
    container = FakeContainer()
    _patch(monkeypatch, container)

    assert app_mod.run_app(["modprofile"]) == 0
    assert container.dialog.shown is True
    assert container.start_path is None
    assert FakeQApplication.org_name == app_mod.APP_ORG
    assert FakeQApplication.app_name == app_mod.APP_NAME
    assert FakeQApplication.version == "1.2.3"


def test_run_app_passes_cli_profile(monkeypatch, tmp_path: Path):
    container = FakeContainer()
    _patch(monkeypatch, container)
    target = tmp_path / "p.json"

    app_mod.run_app(["modprofile", str(target)])
    assert container.start_path == target


def test_configure_logging_uses_config_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(app_mod.logging, "basicConfig", lambda **kw: seen.update(kw))
    app_mod.configure_logging(FakeConfig())
    assert seen["level"] == logging.INFO
    assert seen["format"] == app_mod.LOG_FORMAT
