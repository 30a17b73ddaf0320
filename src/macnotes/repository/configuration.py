# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from macnotes import configuration


class ConfigurationRepository:
    """
    The YAML settings file, read on first use and written back by flush().

    Keys missing from the file are filled in with their defaults; an empty
    file reads as all defaults.
    """

    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self._config = self.__read_file()
        return self._config

    def __read_file(self) -> configuration.Configuration:
        stored: Optional[dict[str, Any]] = load(
            configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
        )
        if stored is None:
            stored = {}

        config = configuration.get_default_configuration()
        for key in config:
            if key in stored:
                config[key] = stored[key]  # type: ignore[literal-required]
            else:
                self.is_dirty = True
        return config

    def flush(self) -> bool:
        if self._config is None or not self.is_dirty:
            return False
        configuration.APP_CONFIG_PATH.write_text(dump(dict(self._config), Dumper=Dumper))
        self.is_dirty = False
        return True

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        save_delay_ms: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        config = self.config

        if remove_data_path:
            config["data_path"] = None
        elif data_path is not None:
            config["data_path"] = data_path
        if save_delay_ms is not None:
            config["save_delay_ms"] = save_delay_ms
        if show_header is not None:
            config["show_header"] = show_header
        if log_level is not None:
            config["log_level"] = log_level

        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
