"""
Welcome Routes
==============

Server-rendered welcome page.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from positronic.core.rendering.welcome_page import WelcomePageRenderer

router = APIRouter(tags=["General"])


def get_renderer(request: Request) -> WelcomePageRenderer:
    """Dependency returning the renderer built at application startup."""
    return request.app.state.welcome_renderer


@router.get("/", response_class=HTMLResponse)
async def welcome(renderer: WelcomePageRenderer = Depends(get_renderer)) -> HTMLResponse:
    """Render the welcome page."""
    return HTMLResponse(await renderer.render())
