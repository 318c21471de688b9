"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squircley.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.squircley_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Squircley",
        description="Superellipse (squircle) SVG path generation and animated rotation previews",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from squircley.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
