# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from trifecta import configuration
from trifecta.template.configuration import get_configuration_template


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    __ensure_data_files()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = get_configuration_template()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    # Daily todo files are authored externally, one YYYY-MM-DD.md per day
    if not configuration.DATA_TODOS_DIR.is_dir():
        configuration.DATA_TODOS_DIR.mkdir(parents=True, exist_ok=True)
