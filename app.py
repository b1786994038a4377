# app.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import config
from middlewares.cors_headers import add_cors_middleware
from routes import debug, index, library, music, podcasts

logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s:%(name)s: %(message)s")
logger = logging.getLogger("uvicorn.error")
logger.setLevel(config.LOG_LEVEL)

# Crear la app
app = FastAPI(title="beatly-music")

# CORS siempre primero (usa el de middlewares/cors_headers.py)
add_cors_middleware(app)

logger.info("🚀 Iniciando FastAPI con ENV=%s (cliente %s)", config.ENV, config.INNERTUBE_CLIENT)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.debug("➡️ Request recibido: %s %s", request.method, request.url)
    response = await call_next(request)
    logger.debug("⬅️ Response enviado: %s %s", response.status_code, request.url)
    return response


# 🚨 Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("❌ Unhandled error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc)},
    )


# Rutas principales
app.include_router(index.router, prefix="/api")
app.include_router(music.router, prefix="/api/music")
app.include_router(library.router, prefix="/api/library")
app.include_router(podcasts.router, prefix="/api/podcasts")

# Rutas de debug (solo fuera de producción)
if not config.IS_PRODUCTION:
    app.include_router(debug.router, prefix="/debug")
