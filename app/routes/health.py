from fastapi import APIRouter, Depends
from app.context import AppContext, get_context
from app.controllers.health_controller import health_check
from app.schemas.bmi_schema import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("", summary="Check cache connection", response_model=HealthResponse)
async def health(ctx: AppContext = Depends(get_context)):
    return await health_check(ctx)
