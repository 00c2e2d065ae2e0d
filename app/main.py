from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from config import STATIC_DIR, index_page_path
from app.api.router import api_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Match Stats Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if os.path.isdir(STATIC_DIR):
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/")
async def root():
    """Entry page, or a short pointer when the static page is missing."""
    index_path = index_page_path()
    if index_path.is_file():
        return FileResponse(str(index_path))
    return {"message": "Match stats tracker is running. See /api/seasons and /api/data."}


app.include_router(api_router)
