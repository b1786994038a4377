# routes/index.py
from fastapi import APIRouter

import config

router = APIRouter()


@router.get("/")
def root():
    return {"message": "OK", "env": config.ENV, "client": config.INNERTUBE_CLIENT}
