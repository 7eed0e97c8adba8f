"""Endpoints HTTP (FastAPI): statut du serveur et état de la partie."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from .coordinator import GameCoordinator


def create_http_app(coordinator: GameCoordinator) -> FastAPI:
    app = FastAPI()

    @app.get("/")
    async def root() -> PlainTextResponse:
        return PlainTextResponse("Dice Roller Game Server is running!")

    @app.get("/api/state")
    async def get_state() -> JSONResponse:
        return JSONResponse(coordinator.snapshot())

    return app
