"""FastAPI application exposing the dbench to benchstat conversion."""

from fastapi import FastAPI

from .. import __version__
from ..config import get_settings
from ..utils.logging import get_logger
from .api.endpoints.convert import router as convert_router

get_logger(level=get_settings().log_level)

app = FastAPI(title="dbench2benchstat", version=__version__)

app.include_router(convert_router)


@app.get("/")
async def root():
    return {"message": "dbench2benchstat API", "version": __version__}
