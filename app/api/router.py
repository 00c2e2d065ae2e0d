from fastapi import APIRouter

from app.api.routes import data, logs, seasons

api_router = APIRouter()
api_router.include_router(seasons.router)
api_router.include_router(data.router)
api_router.include_router(logs.router)
