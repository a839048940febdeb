# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from trifecta import configuration
from trifecta.time import is_date_key

TODO_FILE_SUFFIX = ".md"


class TodoRepository:
    """Read-only access to the daily todo files, one 'YYYY-MM-DD.md' per day."""

    def __init__(self, todos_dir: Optional[Path] = None) -> None:
        self._todos_dir = todos_dir

    @property
    def todos_dir(self) -> Path:
        # Resolved on access so load_data_path_configuration() is honoured
        if self._todos_dir is not None:
            return self._todos_dir
        return configuration.DATA_TODOS_DIR

    def path_for(self, date_key: str) -> Path:
        return self.todos_dir / f"{date_key}{TODO_FILE_SUFFIX}"

    def list_date_keys(self) -> list[str]:
        """
        List the date keys of every daily todo file, sorted ascending.

        Raises:
            OSError: if the todo directory cannot be listed
        """
        date_keys = [
            file_path.stem
            for file_path in self.todos_dir.iterdir()
            if file_path.suffix == TODO_FILE_SUFFIX
            and file_path.is_file()
            and is_date_key(file_path.stem)
        ]
        return sorted(date_keys)

    def read_text(self, date_key: str) -> str:
        """
        Raises:
            OSError: if the file is missing or unreadable
            UnicodeDecodeError: if the file is not valid UTF-8
        """
        return self.path_for(date_key).read_text(encoding="utf-8")


TODO_REPO = TodoRepository()
