# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from contextlib import asynccontextmanager
from datetime import datetime
import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
import uvicorn

from batstats.api import BatStats
from batstats.types.api import PlayerStats
import batstats.types.server as server_types
from batstats.utils.version import get_version


logger = logging.getLogger("batstats.server")

LOAD_ERROR_DETAIL = "Failed to load player data"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handle server startup and shutdown events.
    """
    await _server_startup(app)

    yield

    await _server_shutdown(app)


async def _server_startup(app: FastAPI):
    """
    Perform necessary startup tasks before the server is ready to handle requests.
    """
    app.state.start_time = datetime.now()
    app.state.api = BatStats(**getattr(app.state, "api_kwargs", {}))


async def _server_shutdown(app: FastAPI):
    """
    Perform necessary shutdown tasks after the server has finished handling requests.
    """
    pass


app = FastAPI(lifespan=lifespan)


@app.get("/")
def read_root() -> server_types.StatusResponse:
    return server_types.StatusResponse(
        name="batstats",
        version=get_version(),
        status="running",
        uptime=datetime.now() - app.state.start_time,
    )


@app.get(
    "/api/players",
    response_model=list[PlayerStats],
    responses={500: {"model": server_types.LoadErrorResponse}},
)
def get_players_endpoint(search: str | None = None) -> list[PlayerStats] | JSONResponse:
    """
    Get current, historical, and predicted stats for every player in the hit data.

    `search` keeps only players whose name contains it, ignoring case.
    """
    try:
        api = app.state.api
        return api.get_players(search=search)
    except HTTPException as e:
        raise e
    except Exception as e:
        logger.exception(f"error loading player data: {e}")
        return _load_error_response()


@app.get(
    "/api/players/{player_id}",
    response_model=PlayerStats,
    responses={
        404: {"model": server_types.ErrorResponse},
        500: {"model": server_types.LoadErrorResponse},
    },
)
def get_player_endpoint(player_id: int) -> PlayerStats | JSONResponse:
    """
    Get the stats for one player by output id.
    """
    try:
        api = app.state.api
        player = api.get_player(player_id)
    except HTTPException as e:
        raise e
    except Exception as e:
        logger.exception(f"error loading player data: {e}")
        return _load_error_response()

    if player is None:
        raise HTTPException(status_code=404, detail=f"no player found with id {player_id}")
    return player


def _load_error_response() -> JSONResponse:
    """
    The generic response for any failure while loading player data.
    """
    return JSONResponse(status_code=500, content={"error": LOAD_ERROR_DETAIL})


def run_server(
    host: str = "0.0.0.0",
    port: int = 8056,
    reload: bool = False,
    **api_kwargs: Any,
) -> None:
    """
    Run the FastAPI server. Extra keyword arguments are passed to `BatStats`.
    """
    app.state.api_kwargs = api_kwargs
    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=reload
    )


if __name__ == "__main__":
    run_server()
