from pydantic import BaseModel, Field
from typing import Tuple


# ── Status Models ──
class ServiceBanner(BaseModel):
    message: str


# ── Complex Number Input/Output ──
class ComplexInput(BaseModel):
    # strict: JSON strings and booleans are not numbers
    re: float = Field(..., strict=True, allow_inf_nan=False, description="Real part (a)")
    im: float = Field(..., strict=True, allow_inf_nan=False, description="Imaginary part (b)")

class ComplexResult(BaseModel):
    model_config = {"frozen": True}

    re: float
    im: float
    magnitude: float = Field(..., ge=0)
    argument_rad: float
    argument_deg: float
    polar_form: str
    steps: Tuple[str, ...]
