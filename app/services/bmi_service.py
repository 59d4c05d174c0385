import json
import logging
import math
from typing import Any, Dict, Optional, Tuple
from pydantic import ValidationError
from app.schemas.bmi_schema import BMIRequest
from app.services.bmi_calculator import compute_bmi, categorize_bmi
from app.utils.redis_util import CacheClient

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input data"
INVALID_HEIGHT = "Invalid height"
INVALID_WEIGHT = "Invalid weight"

DEFAULT_CACHE_TTL = 500
JSON_CONTENT_TYPE = "application/json"


def cache_key(height: float, weight: float) -> str:
    # repr() is the shortest string that round-trips the float, so distinct
    # inputs can never collide on one key.
    return f"bmi:{float(height)!r}:{float(weight)!r}"


def is_json_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == JSON_CONTENT_TYPE


def decode_cached_bmi(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        value = json.loads(raw)
    except ValueError:
        return None
    # bool is an int subclass, and "true" is not a BMI
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


class BMIService:
    """
    Validates a BMI request, serves it from cache when possible and otherwise
    computes and caches the value.
    """

    def __init__(self, cache: CacheClient, ttl: int = DEFAULT_CACHE_TTL):
        self.cache = cache
        self.ttl = ttl

    async def handle(self, raw_body: bytes, content_type: Optional[str] = JSON_CONTENT_TYPE) -> Tuple[int, Dict[str, Any]]:
        if not is_json_content_type(content_type):
            logger.warning(f"invalid request: unsupported content type {content_type!r}")
            return 400, {"error": INVALID_INPUT}

        try:
            req = BMIRequest.model_validate_json(raw_body)
        except ValidationError as e:
            logger.warning(f"invalid request: {e.error_count()} validation error(s)")
            return 400, {"error": INVALID_INPUT}

        if req.height == 0:
            logger.warning("invalid height")
            return 400, {"error": INVALID_HEIGHT}
        if req.weight == 0:
            logger.warning("invalid weight")
            return 400, {"error": INVALID_WEIGHT}

        key = cache_key(req.height, req.weight)

        cached = decode_cached_bmi(await self.cache.get(key))
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return 200, self._result(cached)

        logger.debug(f"Cache miss: {key}")
        try:
            value = compute_bmi(req.weight, req.height)
        except (OverflowError, ZeroDivisionError):
            # height so small its square underflows, or a square too large for a float
            value = math.inf
        if not math.isfinite(value):
            logger.warning(f"BMI for {key} is not a finite number")
            return 400, {"error": INVALID_INPUT}

        if not await self.cache.set(key, json.dumps(value), self.ttl):
            logger.error(f"Failed to cache BMI for {key}")

        return 200, self._result(value)

    @staticmethod
    def _result(value: float) -> Dict[str, Any]:
        return {"BMI": value, "message": categorize_bmi(value)}
