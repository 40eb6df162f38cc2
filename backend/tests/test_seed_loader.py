import json
from pathlib import Path

import pytest

from games_api.domain.models.game import Game
from games_api.infrastructure.seed_loader import DEFAULT_SEED, SeedError, load_games

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def test_default_seed():
    games = load_games(None)
    assert games == list(DEFAULT_SEED)
    assert [g.name for g in games] == ["Demon Souls", "Dark Souls", "Bloodborn"]


def test_bundled_yaml_matches_default():
    assert load_games(DATA_DIR / "games.yml") == list(DEFAULT_SEED)


def test_load_json(tmp_path: Path):
    path = tmp_path / "games.json"
    path.write_text(json.dumps([{"id": 9, "name": "Hades"}]), encoding="utf8")
    assert load_games(str(path)) == [Game(9, "Hades")]


def test_empty_yaml(tmp_path: Path):
    path = tmp_path / "games.yml"
    path.write_text("", encoding="utf8")
    assert load_games(path) == []


def test_missing_file(tmp_path: Path):
    with pytest.raises(SeedError):
        load_games(tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "content",
    [
        "id: 1\nname: Hades\n",
        "- id: 1\n- name: Hades\n",
        "- id: 999\n  name: Hades\n",
        "- [unclosed\n",
    ],
)
def test_invalid_seed(tmp_path: Path, content: str):
    path = tmp_path / "games.yml"
    path.write_text(content, encoding="utf8")
    with pytest.raises(SeedError):
        load_games(path)
