# SPDX-License-Identifier: MIT

from trifecta.configuration import Configuration

ZENQUOTES_RANDOM_URL = "https://zenquotes.io/api/random"


def get_configuration_template() -> Configuration:
    return {
        "data_path": None,
        "default_width": 1179,
        "default_height": 2556,
        "default_timezone": "UTC",
        "rotation_interval_minutes": 15,
        "show_trifecta": True,
        "trifecta_encoding": "slices",
        "fetch_quotes": True,
        "quote_url": ZENQUOTES_RANDOM_URL,
        "quote_timeout_seconds": 5.0,
        "quote_cache_seconds": 3600,
        "font_regular_path": None,
        "font_bold_path": None,
        "log_level": "INFO",
        "host": "127.0.0.1",
        "port": 8000,
    }
