# config.py
import os

from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _get_csv_list(name: str, default: str) -> list[str]:
    return [o.strip() for o in os.getenv(name, default).split(",") if o.strip()]


ENV = os.getenv("NODE_ENV", "development")
IS_PRODUCTION = ENV == "production"

# Servidor
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _get_int("PORT", 3000)
RELOAD = _get_bool("RELOAD", not IS_PRODUCTION)

CORS_ORIGINS = _get_csv_list(
    "CORS_ORIGINS",
    "http://localhost:8080,http://127.0.0.1:8080,http://localhost:5173,http://127.0.0.1:5173",
)

# Cliente InnerTube (WEB_REMIX = YouTube Music web)
INNERTUBE_CLIENT = os.getenv("INNERTUBE_CLIENT", "WEB_REMIX")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
