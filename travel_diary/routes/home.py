"""
Travel Diary Backend — Landing Page
====================================

What:  GET / returns a small HTML page linking to the three collections.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Home"])

WELCOME_PAGE = """[DEMO] Welcome to the Travel Diary Platform!
<br>
<br> To access users data, use: <a href="/users">/users</a>
<br> To access travel entries, use: <a href="/entries">/entries</a>
<br> To access locations, use: <a href="/locations">/locations</a>
<br> ..."""


@router.get("/", response_class=HTMLResponse, summary="Landing page with links")
async def home() -> HTMLResponse:
    return HTMLResponse(content=WELCOME_PAGE)
