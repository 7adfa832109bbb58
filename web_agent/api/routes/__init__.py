"""API routes."""

from fastapi import APIRouter

from web_agent.api.routes import auth, chat, health, widget

# Mounted under settings.api_prefix
api_router = APIRouter()
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
api_router.include_router(health.router, prefix="/health", tags=["health"])

# Mounted at the site root
page_router = APIRouter()
page_router.include_router(widget.router, prefix="/widget", tags=["widget"])
page_router.include_router(auth.router, prefix="/auth", tags=["auth"])
