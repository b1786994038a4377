# main.py
import uvicorn

import config
from app import app

if __name__ == "__main__":
    uvicorn.run(
        "main:app",          # módulo:objeto (main.py reexporta app)
        host=config.HOST,    # escucha en todas las interfaces por defecto
        port=config.PORT,
        reload=config.RELOAD,  # autoreload en desarrollo
        log_level=config.LOG_LEVEL.lower(),
    )
