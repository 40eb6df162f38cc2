import os


def env_log_level(default: str) -> str:
    # logging accepts only upper-case level names
    return os.getenv("LOG_LEVEL", default).strip().upper()


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    DEBUG = False
    TESTING = False

    HOST = os.getenv("GAMES_API_HOST", "127.0.0.1")
    PORT = int(os.getenv("GAMES_API_PORT", "8080"))

    # None -> встроенный набор игр (infrastructure/seed_loader.py)
    SEED_FILE = os.getenv("GAMES_SEED_FILE") or None

    LOG_LEVEL = env_log_level("INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")


class DevConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = env_log_level("DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    SEED_FILE = None


CONFIGS = {"production": BaseConfig, "dev": DevConfig, "testing": TestingConfig}


def config_from_env() -> type[BaseConfig]:
    """GAMES_API_ENV выбирает конфиг; по умолчанию production (без debug)."""
    name = os.getenv("GAMES_API_ENV", "production").strip().lower()
    try:
        return CONFIGS[name]
    except KeyError:
        raise ValueError(
            f"unknown GAMES_API_ENV {name!r}, expected one of {sorted(CONFIGS)}"
        ) from None
