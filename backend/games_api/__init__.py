from __future__ import annotations

import logging

from flask import Flask

from .api import register_routes
from .config import DevConfig, config_from_env
from .domain.models.game import Game
from .domain.store import Store
from .extensions import cors, socketio
from .infrastructure.memory.store import InMemoryStore
from .infrastructure.seed_loader import load_games

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def create_app(config_object=DevConfig, store: Store[Game] | None = None):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    )

    # ── extensions ─────────────────────────────────────────────
    origins = app.config["CORS_ORIGINS"]
    cors.init_app(app, resources={r"/*": {"origins": origins}})
    socketio.init_app(app, cors_allowed_origins="*" if origins == ["*"] else origins)

    # ── store ──────────────────────────────────────────────────
    if store is None:
        store = InMemoryStore.init(load_games(app.config["SEED_FILE"]))
    app.extensions["game_store"] = store

    # ── routes ─────────────────────────────────────────────────
    register_routes(app, store)
    return app


__all__ = ("config_from_env", "create_app", "socketio")
