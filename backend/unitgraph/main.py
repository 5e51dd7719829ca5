"""unitgraph — FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitgraph.config import settings
from unitgraph.api.routes_parse import router as parse_router
from unitgraph.api.routes_convert import router as convert_router

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Dimensional analysis and unit conversion over a graph of registered conversions.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parse_router, prefix="/api")
app.include_router(convert_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
