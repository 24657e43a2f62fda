# main.py
"""
Application entrypoint. Includes routers and mounts.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from classdivider.api.routers import divisions
from classdivider.config.settings import settings

app = FastAPI(title="Class Divider")

# Basic CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
app.include_router(divisions.router, prefix="/api/v1/divisions", tags=["divisions"])


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": "classdivider", "env": settings.ENV}
