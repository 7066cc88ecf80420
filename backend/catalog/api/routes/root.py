"""Root Route: plain-text welcome message."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])

WELCOME_MESSAGE = "Welcome to the Product API!"


@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_MESSAGE
