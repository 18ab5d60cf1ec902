import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api import tasks
from todo_api.config import get_settings
from todo_api.core.errors import register_exception_handlers
from todo_api.database import init_db

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s: %(message)s")
logging.getLogger("todo_api").setLevel(settings.log_level.upper())

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Session-scoped to-do list backend",
    version=__version__,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(tasks.router)

ENDPOINTS = {
    "list": "GET /tasks",
    "create": "POST /tasks",
    "get": "GET /tasks/:id",
    "update": "PUT /tasks/:id",
    "toggle": "PATCH /tasks/:id/toggle",
    "delete": "DELETE /tasks/:id",
}


@app.on_event("startup")
def startup_event():
    """Initialize database on startup. Failure stops the server."""
    init_db()


@app.get("/")
def root():
    """Describe the API."""
    return {
        "message": "Todo List API is running",
        "status": "ok",
        "endpoints": ENDPOINTS,
    }


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
