# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "macnotes"

DEFAULT_FOLDER_NAME = "General"
STARTER_NOTE_TEXT = "Start writing quick notes from your menu bar."
DEFAULT_SAVE_DELAY_MS = 250

NOTE_FILE_SUFFIX = ".txt"
FOLDERS_META_FILENAME = "_folders.meta"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_NOTES_DIR: Path = DATA_PATH / "notes"


class Configuration(TypedDict):
    data_path: Optional[str]
    save_delay_ms: int
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "save_delay_ms": DEFAULT_SAVE_DELAY_MS,
        "show_header": True,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the note
    store touches the disk.
    """
    global DATA_PATH, DATA_NOTES_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_NOTES_DIR = DATA_PATH / "notes"
