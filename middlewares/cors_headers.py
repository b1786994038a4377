# middlewares/cors_headers.py
from fastapi.middleware.cors import CORSMiddleware

import config


def add_cors_middleware(app, origins: list[str] | None = None):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS if origins is None else origins,
        allow_credentials=False,  # nada de cookies
        allow_methods=["GET", "OPTIONS"],  # la API es de solo lectura
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=86400,
    )
