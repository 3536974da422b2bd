"""
Wedding Table Finder - FastAPI application
Main application entry point
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
import uvicorn

from app.core.config import settings
from app.core.store import get_guest_repo, guest_list_repo
from app.api import routes_admin, routes_guest, routes_public
from app.api.routes_guest import build_search_results
from app.services.list_service import ListService
from app.services.repositories import GuestListRepo
from app.services.seating_service import SeatingService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info("Guest list loaded with %d guests", guest_list_repo.count())
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Wedding Table Finder",
    description="Find your table by name or browse the seating chart",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup templates
templates = Jinja2Templates(directory=os.path.join(os.path.dirname(__file__), "templates"))

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_guest.router, prefix="/guest", tags=["guest"])
app.include_router(routes_admin.router, prefix="/admin", tags=["admin"])

@app.get("/", response_class=HTMLResponse)
async def root(
    request: Request,
    q: str = "",
    mode: str = "search",
    imported: Optional[int] = None,
    repo: GuestListRepo = Depends(get_guest_repo)
):
    """Finder page: search by name or list by table"""
    if mode not in ("search", "list"):
        mode = "search"
    
    guests = repo.all()
    return templates.TemplateResponse(request, "seating_finder.html", {
        "settings": settings,
        "mode": mode,
        "query": q,
        "search": build_search_results(repo, q, settings.MAX_DISPLAY_RESULTS),
        "groups": SeatingService.group_by_table(guests),
        "copy_table": SeatingService.copy_text,
        "csv_text": ListService.serialize_list(guests),
        "imported": imported
    })

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
