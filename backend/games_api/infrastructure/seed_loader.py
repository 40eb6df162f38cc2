from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, List

import yaml

from games_api.domain.models.game import Game

logger = logging.getLogger(__name__)

DEFAULT_SEED: tuple[Game, ...] = (
    Game(1, "Demon Souls"),
    Game(2, "Dark Souls"),
    Game(3, "Bloodborn"),
)


class SeedError(ValueError):
    pass


def load_any(path: Path) -> Any:
    with path.open(encoding="utf8") as f:
        return yaml.safe_load(f) if path.suffix in {".yml", ".yaml"} else json.load(f)


def load_games(path: Path | str | None) -> List[Game]:
    """Начальный список игр: из файла, либо встроенный набор."""
    if path is None:
        return list(DEFAULT_SEED)

    path = Path(path)
    if not path.is_file():
        raise SeedError(f"seed file not found: {path}")

    try:
        raw = load_any(path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SeedError(f"{path}: cannot parse seed file: {e}") from e
    if raw is None:
        raw = []
    if not isinstance(raw, list):
        raise SeedError(f"{path}: expected a list of games")

    games = []
    for idx, rec in enumerate(raw):
        try:
            games.append(Game.from_raw(rec))
        except ValueError as e:
            raise SeedError(f"{path}: record #{idx}: {e}") from e

    logger.info("loaded %d games from %s", len(games), path)
    return games
