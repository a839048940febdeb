# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "trifecta"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TODOS_DIR: Path = DATA_PATH / "todos"

TrifectaEncoding = Literal["slices", "blended"]


class Configuration(TypedDict):
    data_path: Optional[str]
    default_width: int
    default_height: int
    default_timezone: str
    rotation_interval_minutes: int
    show_trifecta: bool
    trifecta_encoding: TrifectaEncoding
    fetch_quotes: bool
    quote_url: str
    quote_timeout_seconds: float
    quote_cache_seconds: int
    font_regular_path: Optional[str]
    font_bold_path: Optional[str]
    log_level: str
    host: str
    port: int


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the todo
    repository reads anything.
    """
    global DATA_PATH, DATA_TODOS_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_TODOS_DIR = DATA_PATH / "todos"
