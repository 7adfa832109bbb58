"""Widget page, public widget config and embed snippet."""

from pathlib import Path
from string import Template
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import FileResponse, Response

from web_agent.api.deps import get_brand_registry
from web_agent.domain.brands.registry import BrandRegistry
from web_agent.settings import settings

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
WIDGET_PAGE = STATIC_DIR / "widget.html"

EMBED_SCRIPT = Template("""(function() {
  // Prevent duplicate injection
  if (document.getElementById('$iframe_id')) return;

  var iframe = document.createElement('iframe');
  iframe.id = '$iframe_id';
  iframe.src = '$widget_url';
  iframe.title = '$name chat';
  iframe.style.cssText = 'position:fixed;bottom:0;right:0;width:400px;height:100vh;border:none;background:transparent;z-index:999999;';
  iframe.setAttribute('allow', 'microphone; clipboard-write');
  iframe.setAttribute('sandbox', 'allow-same-origin allow-scripts allow-popups allow-forms');
  document.body.appendChild(iframe);

  var style = document.createElement('style');
  style.textContent = '@media (max-width: 768px) { #$iframe_id { width: 100% !important; } }';
  document.head.appendChild(style);
})();
""")


@router.get("", include_in_schema=False)
async def widget_page():
    """Transparent-background widget page embedded via iframe."""
    if not WIDGET_PAGE.exists():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Widget page not found")
    return FileResponse(WIDGET_PAGE, media_type="text/html")


@router.get("/config")
async def widget_config(
    registry: Annotated[BrandRegistry, Depends(get_brand_registry)],
    brand: str = Query(default=""),
):
    """Public configuration the widget needs to render and reach the chat API."""
    config = registry.resolve(brand or settings.default_brand)
    return {
        "brand": config.brand.value,
        "name": config.name,
        "theme": config.theme,
        "primaryColor": config.primary_color,
        "avatar": config.avatar,
        "quickButtons": list(config.quick_buttons),
        "exploreButtons": list(config.explore_buttons),
        "showQuickButtons": config.show_quick_buttons,
        "showFollowUpButtons": config.show_follow_up_buttons,
        "maxFollowUps": config.max_follow_ups,
        "apiUrl": settings.chat_api_url,
        "summarizeUrl": f"{settings.chat_api_url.rstrip('/')}/summarize",
    }


@router.get("/embed.js", include_in_schema=False)
async def embed_script(
    request: Request,
    registry: Annotated[BrandRegistry, Depends(get_brand_registry)],
    brand: str = Query(default=""),
):
    """JavaScript snippet that injects the widget iframe into a host page."""
    config = registry.resolve(brand or settings.default_brand)
    base_url = (settings.widget_base_url or str(request.base_url)).rstrip("/")
    script = EMBED_SCRIPT.substitute(
        iframe_id=f"{config.brand.value}-bubble-iframe",
        widget_url=f"{base_url}/widget?brand={config.brand.value}",
        name=config.name,
    )
    return Response(
        content=script,
        media_type="application/javascript",
        headers={
            "Cache-Control": "public, max-age=3600",
            "Access-Control-Allow-Origin": "*",
        },
    )
