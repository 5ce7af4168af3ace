"""Public routes: root banner."""
from fastapi import APIRouter

from config import API_TITLE
from models import ServiceBanner

router = APIRouter()


@router.get("/", response_model=ServiceBanner)
async def root():
    return ServiceBanner(message=API_TITLE)
