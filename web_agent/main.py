"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from web_agent.api.middleware import RequestContextMiddleware
from web_agent.api.routes import api_router, page_router
from web_agent.api.routes.widget import STATIC_DIR
from web_agent.domain.brands.registry import build_brand_registry
from web_agent.logging_config import setup_logging
from web_agent.settings import settings

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    app.state.brand_registry = build_brand_registry(settings.default_brand)
    logger.info(
        "Brand registry loaded",
        extra={
            "brands": app.state.brand_registry.brands(),
            "default_brand": app.state.brand_registry.default.brand.value,
        },
    )
    yield
    # Shutdown
    llm_client = getattr(app.state, "llm_client", None)
    if llm_client is not None:
        await llm_client.aclose()
    app.state.llm_client = None


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Branded chat widgets backed by an LLM",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Add request context middleware
app.add_middleware(RequestContextMiddleware)

# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)

# Widget and auth pages
app.include_router(page_router)

# Serve static files (widget assets)
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "health": f"{settings.api_prefix}/health",
        "widget": "/widget",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("web_agent.main:app", host="0.0.0.0", port=8000)
