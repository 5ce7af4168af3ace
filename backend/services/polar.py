"""Complex number -> polar form conversion with step-by-step explanation (Thai)."""
import math
from typing import Tuple

from models import ComplexResult
from services.formatting import fmt4, fmt_plain, format_polar_form


class NonFiniteInputError(ValueError):
    """Raised when re or im is NaN or infinite."""


# ── Quadrant Labels ──

QUADRANT_LABELS = {
    "q1": "Quadrant I (มุมบวก, 0° < θ < 90°)",
    "q2": "Quadrant II (90° < θ < 180°)",
    "q3": "Quadrant III (-180° < θ < -90°)",
    "q4": "Quadrant IV (-90° < θ < 0°)",
    "pos_real": "Quadrant I / แกนจริงบวก (θ = 0°)",
    "neg_real": "Quadrant II / แกนจริงลบ (θ = 180°)",
    "pos_imag": "แกนจินตภาพบวก (θ = 90°)",
    "neg_imag": "แกนจินตภาพลบ (θ = -90°)",
    "origin": "จุดกำเนิด (Origin)",
}


def classify_quadrant(a: float, b: float) -> str:
    """Key into QUADRANT_LABELS for the sign combination of (a, b)."""
    if a > 0:
        if b > 0: return "q1"
        if b < 0: return "q4"
        return "pos_real"
    if a < 0:
        if b > 0: return "q2"
        if b < 0: return "q3"
        return "neg_real"
    if b > 0: return "pos_imag"
    if b < 0: return "neg_imag"
    return "origin"


def quadrant_label(a: float, b: float) -> str:
    return QUADRANT_LABELS[classify_quadrant(a, b)]


# ── Step Text ──

def build_steps(a: float, b: float, magnitude: float,
                argument_rad: float, argument_deg: float) -> Tuple[str, ...]:
    """Seven explanation lines, always in this order.

    Inputs are echoed as typed (fmt_plain); computed values use 4 decimals.
    """
    sa, sb = fmt_plain(a), fmt_plain(b)
    a2, b2 = a * a, b * b
    return (
        f"📌 Step 1: กำหนดค่า z = {sa} + {sb}i (ส่วนจริง a = {sa}, ส่วนจินตภาพ b = {sb})",
        "📐 Step 2: หาค่า r (Magnitude) จากสูตร r = √(a² + b²)",
        f"   ➜ r = √(({sa})² + ({sb})²) = √({fmt_plain(a2)} + {fmt_plain(b2)}) = √{fmt_plain(a2 + b2)} = {fmt4(magnitude)}",
        "📏 Step 3: หาค่า θ (Argument) จากสูตร θ = atan2(b, a)",
        f"   ➜ θ = atan2({sb}, {sa}) = {fmt4(argument_rad)} เรเดียน = {fmt4(argument_deg)}°",
        f"🧭 Step 4: จุด ({sa}, {sb}) อยู่ใน {quadrant_label(a, b)}",
        f"✅ Step 5: เขียนในรูปเชิงขั้ว (Polar Form) ➜ z = {format_polar_form(magnitude, argument_deg)}",
    )


# ── Conversion ──

def convert_to_polar(re: float, im: float) -> ComplexResult:
    if not (math.isfinite(re) and math.isfinite(im)):
        raise NonFiniteInputError(f"re and im must be finite numbers, got re={re!r}, im={im!r}")

    # -0.0 + 0.0 == +0.0; keeps atan2 off the -π branch and the origin at 0
    a = float(re) + 0.0
    b = float(im) + 0.0

    r = math.hypot(a, b)
    theta_rad = math.atan2(b, a)
    theta_deg = math.degrees(theta_rad)

    return ComplexResult(
        re=a, im=b,
        magnitude=r,
        argument_rad=theta_rad,
        argument_deg=theta_deg,
        polar_form=format_polar_form(r, theta_deg),
        steps=build_steps(a, b, r, theta_rad, theta_deg),
    )
