# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from trifecta import configuration
from trifecta.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        template = get_configuration_template()
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = template
            return

        raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is not a mapping"
            )

        # Back-fill any field added since the file was written
        loaded = cast(dict[str, Any], raw_config)
        for key, value in template.items():
            if key not in loaded:
                loaded[key] = value
        self._config = cast(configuration.Configuration, loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        default_timezone: Optional[str] = None,
        show_trifecta: Optional[bool] = None,
        trifecta_encoding: Optional[configuration.TrifectaEncoding] = None,
        fetch_quotes: Optional[bool] = None,
        font_regular_path: Optional[str] = None,
        font_bold_path: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if default_timezone is not None:
            self.config["default_timezone"] = default_timezone
        if show_trifecta is not None:
            self.config["show_trifecta"] = show_trifecta
        if trifecta_encoding is not None:
            self.config["trifecta_encoding"] = trifecta_encoding
        if fetch_quotes is not None:
            self.config["fetch_quotes"] = fetch_quotes
        if font_regular_path is not None:
            self.config["font_regular_path"] = font_regular_path
        if font_bold_path is not None:
            self.config["font_bold_path"] = font_bold_path
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
