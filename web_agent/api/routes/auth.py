"""Auth pages served by this app."""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from web_agent.settings import settings

router = APIRouter()


@router.api_route("/signup", methods=["GET", "POST"], include_in_schema=False)
async def signup_redirect():
    """Signup is disabled; always redirect to login."""
    return RedirectResponse(url=settings.login_path)
