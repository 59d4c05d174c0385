from typing import Optional
from fastapi.responses import JSONResponse
from app.context import AppContext

async def calculate_bmi(raw_body: bytes, content_type: Optional[str], ctx: AppContext) -> JSONResponse:
    status_code, body = await ctx.bmi_service.handle(raw_body, content_type)
    return JSONResponse(status_code=status_code, content=body)
