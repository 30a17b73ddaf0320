# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from macnotes import configuration
from macnotes.repository.configuration import CONFIGURATION_REPO
from macnotes.store import NOTE_STORE
from macnotes.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_NOTES_DIR.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    __configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    NOTE_STORE.save_delay = config["save_delay_ms"] / 1000


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
