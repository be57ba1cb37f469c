"""
Informational endpoints.

These are mounted at the application root rather than under the API
prefix: a welcome document listing the resource collections, a static
"about" page and a toy search endpoint echoing the query.
"""

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

from crud_api.app.schemas.common import WelcomeResponse

router = APIRouter()


@router.get("/", response_model=WelcomeResponse)
async def welcome(request: Request) -> WelcomeResponse:
    """Describe the API and where its collections live."""
    settings = request.app.state.settings
    return WelcomeResponse(
        message=f"Welcome to the {settings.project_name} API",
        endpoints={
            "users": f"{settings.api_prefix}/users",
            "products": f"{settings.api_prefix}/products",
        },
    )


@router.get("/about", response_class=PlainTextResponse)
async def about() -> str:
    return "About Us"


@router.get("/search", response_class=PlainTextResponse)
async def search(q: str = Query("", description="Text to search for")) -> str:
    return f"Search results for: {q}"
