from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from app.context import AppContext, get_context
from app.controllers.bmi_controller import calculate_bmi
from app.schemas.bmi_schema import BMIRequest, BMIResponse, ErrorResponse, RateLimitResponse


def build_bmi_router(limiter: Limiter, limit: str) -> APIRouter:
    router = APIRouter(tags=["BMI"])

    @router.post(
        "/bmi",
        summary="Calculate Body Mass Index",
        response_model=BMIResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid input data, height or weight"},
            429: {"model": RateLimitResponse, "description": "Rate limit exceeded"},
        },
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": BMIRequest.model_json_schema()}},
            }
        },
    )
    @limiter.limit(limit)
    async def bmi(request: Request, ctx: AppContext = Depends(get_context)):
        """
        Body: `{"weight": <kg>, "height": <cm>}` sent as `application/json`.
        The body is read raw so malformed input gets the service's own 400 response.
        """
        return await calculate_bmi(await request.body(), request.headers.get("content-type"), ctx)

    return router
