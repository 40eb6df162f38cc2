from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

__all__ = ("Game", "GAME_ID_MAX", "parse_game_id")

GAME_ID_MAX = 255  # ids are single unsigned bytes


def _check_range(value: int) -> int:
    if not 0 <= value <= GAME_ID_MAX:
        raise ValueError(f"game id must be between 0 and {GAME_ID_MAX}, got {value}")
    return value


def parse_game_id(raw: str) -> int:
    """Id из сегмента пути: только десятичные цифры ASCII."""
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"game id must be an unsigned integer, got {raw!r}")
    return _check_range(int(raw))


@dataclass(frozen=True, slots=True)
class Game:
    id: int
    name: str

    def get_id(self) -> int:
        return self.id

    # ── serialize ──────────────────────────────────────────────
    @classmethod
    def from_raw(cls, raw: Any) -> "Game":
        if not isinstance(raw, dict):
            raise ValueError("game must be a JSON object")
        if "id" not in raw or "name" not in raw:
            raise ValueError("game requires 'id' and 'name'")

        gid, name = raw["id"], raw["name"]
        # bool is a subclass of int, True must not become id 1
        if isinstance(gid, bool) or not isinstance(gid, int):
            raise ValueError(f"game id must be an integer, got {gid!r}")
        if not isinstance(name, str):
            raise ValueError(f"game name must be a string, got {name!r}")
        return cls(id=_check_range(gid), name=name)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}
