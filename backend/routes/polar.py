"""Complex number -> polar form route."""
import logging
from fastapi import APIRouter, HTTPException

from models import ComplexInput, ComplexResult
from services.polar import convert_to_polar, NonFiniteInputError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=ComplexResult)
async def calculate_polar(input_data: ComplexInput):
    try:
        result = convert_to_polar(input_data.re, input_data.im)
    except NonFiniteInputError as e:
        logger.warning(f"Rejected polar conversion: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    logger.debug(f"Polar conversion re={result.re} im={result.im} -> {result.polar_form}")
    return result
