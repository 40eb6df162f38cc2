import pytest

from games_api import create_app, socketio
from games_api.config import TestingConfig
from games_api.domain.models.game import Game
from games_api.infrastructure.memory.store import InMemoryStore
from games_api.sockets import GAME_DELETED, GAME_SAVED


@pytest.fixture
def app():
    return create_app(TestingConfig, store=InMemoryStore.init([Game(1, "Demon Souls")]))


@pytest.fixture
def sock(app):
    client = socketio.test_client(app)
    assert client.is_connected()
    client.get_received()
    yield client
    client.disconnect()


def _events(sock, name):
    return [msg["args"][0] for msg in sock.get_received() if msg["name"] == name]


def test_put_broadcasts_game_saved(app, sock):
    http = app.test_client()
    http.put("/games", json={"id": 2, "name": "Age of Empires"})
    http.put("/games", json={"id": 1, "name": "Dark Souls"})

    assert _events(sock, GAME_SAVED) == [
        {"game": {"id": 2, "name": "Age of Empires"}, "created": True},
        {"game": {"id": 1, "name": "Dark Souls"}, "created": False},
    ]


def test_delete_broadcasts_only_hits(app, sock):
    http = app.test_client()
    http.delete("/games/1")
    http.delete("/games/1")

    assert _events(sock, GAME_DELETED) == [{"id": 1}]


def test_rejected_put_is_silent(app, sock):
    app.test_client().put("/games", json={"id": "x"})
    assert sock.get_received() == []


def test_handlers_registered_once():
    """Повторный create_app не плодит обработчики connect/disconnect."""
    create_app(TestingConfig, store=InMemoryStore())
    create_app(TestingConfig, store=InMemoryStore())

    names = [h[0] for h in socketio.handlers]
    assert names.count("connect") == 1
    assert names.count("disconnect") == 1
