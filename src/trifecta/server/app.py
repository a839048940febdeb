# SPDX-License-Identifier: MIT

import logging
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import FastAPI, Query
from fastapi.responses import PlainTextResponse, Response

from trifecta.repository.configuration import CONFIGURATION_REPO
from trifecta.repository.todo import TODO_REPO
from trifecta.service.quote import QuoteClient
from trifecta.service.wallpaper import render_wallpaper

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}

# Largest accepted width or height, in pixels
MAX_DIMENSION = 4096

app = FastAPI(title="Trifecta wallpaper", docs_url=None, redoc_url=None)


@lru_cache(maxsize=1)
def get_quote_client() -> QuoteClient:
    config = CONFIGURATION_REPO.get_config()
    return QuoteClient(
        config["quote_url"],
        timeout_seconds=config["quote_timeout_seconds"],
        cache_seconds=config["quote_cache_seconds"],
    )


@app.get("/api/wallpaper")
def wallpaper(
    width: Annotated[Optional[int], Query(gt=0, le=MAX_DIMENSION)] = None,
    height: Annotated[Optional[int], Query(gt=0, le=MAX_DIMENSION)] = None,
    view: Optional[str] = None,
    tz: Optional[str] = None,
) -> Response:
    """Render the wallpaper PNG for the requested size, view and timezone."""
    config = CONFIGURATION_REPO.get_config()
    try:
        png = render_wallpaper(
            config,
            TODO_REPO,
            width=width,
            height=height,
            view=view,
            tz=tz,
            quote_client=get_quote_client() if config["fetch_quotes"] else None,
        )
    except Exception:
        logger.exception("Error generating wallpaper")
        return PlainTextResponse("Error generating wallpaper", status_code=500)

    return Response(content=png, media_type="image/png", headers=NO_CACHE_HEADERS)
