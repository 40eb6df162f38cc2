from .events import GAME_DELETED, GAME_SAVED, notify_deleted, notify_saved

__all__ = ("GAME_DELETED", "GAME_SAVED", "notify_deleted", "notify_saved")
