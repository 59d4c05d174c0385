from .health import router as health_router
from .bmi import build_bmi_router

__all__ = ["health_router", "build_bmi_router"]
