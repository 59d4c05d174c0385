from dataclasses import dataclass
from fastapi import Request
from app.config import Settings
from app.services.bmi_service import BMIService
from app.utils.redis_util import CacheClient


@dataclass
class AppContext:
    """Everything a request needs, built once per application."""
    settings: Settings
    cache: CacheClient
    bmi_service: BMIService


def get_context(request: Request) -> AppContext:
    return request.app.state.context
