from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from modprofile.di.container import Container
from modprofile.services.config.app_config import AppConfig, build_app_config
from modprofile.utils.constants import APP_NAME, APP_ORG

_LOG = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(level=config.log_level(), format=LOG_FORMAT)
    if config.loaded_from is not None:
        _LOG.info("Configuration loaded from %s", config.loaded_from)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the editor via the DI container
    and runs the profile editor dialog until it is closed.
    """
    config = build_app_config()
    configure_logging(config)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    QApplication.setApplicationVersion(config.get_version())
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional profile to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    dialog = container.build_profile_editor(start_path=start_path)
    dialog.show()

    return app.exec()
