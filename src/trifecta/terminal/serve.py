# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
import uvicorn

from trifecta.repository.configuration import CONFIGURATION_REPO


def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Bind port")] = None,
) -> None:
    """Serve the wallpaper at GET /api/wallpaper."""
    config = CONFIGURATION_REPO.get_config()
    uvicorn.run(
        "trifecta.server.app:app",
        host=host or config["host"],
        port=port or config["port"],
        log_config=None,
    )
