"""FastAPI application factory."""

from __future__ import annotations
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomscan.api.routes import router


def create_app(cors_origins: list[str] | None = None) -> FastAPI:
    if cors_origins is None:
        cors_origins = os.getenv("ROOMSCAN_CORS_ORIGINS", "*").split(",")

    app = FastAPI(
        title="Room Scan Reconstruction",
        description="Closed-room reconstruction from planar wall observations",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
