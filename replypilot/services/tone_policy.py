import math
from typing import Callable

DEFAULT_RATING = 5.0

# Evaluated top-down; the first matching band wins. Ratings 2-4 match by
# equality only, so fractional values such as 4.5 select no band.
TONE_BANDS: tuple[tuple[Callable[[float], bool], str], ...] = (
    (
        lambda r: r >= 5,
        "Sound very thankful, warm, and appreciative. "
        "Reinforce trust and invite them back.",
    ),
    (
        lambda r: r == 4,
        "Be positive and appreciative. "
        "Thank them and encourage them to order again.",
    ),
    (
        lambda r: r == 3,
        "Use a gently apologetic but hopeful tone. "
        "Acknowledge any issues and show willingness to improve.",
    ),
    (
        lambda r: r == 2,
        "Use a clear apologetic tone. Acknowledge the problem, express regret, "
        "and invite them to contact support so you can fix it.",
    ),
    (
        lambda r: r <= 1,
        "Use a serious, sincere apologetic tone. Take responsibility where "
        "appropriate, show empathy, and clearly invite them to contact support "
        "so you can resolve the issue.",
    ),
)


def coerce_rating(value: object) -> float:
    """
    Convert a client-supplied rating into a number.

    Missing, boolean, non-numeric and non-finite values become DEFAULT_RATING.
    Numeric strings such as " 4 " are accepted. Integers too large for a
    float are treated as non-finite.
    """
    # A numeric 0 stays 0 (serious apology band) and true is not read as 1;
    # only non-numeric input is defaulted.
    if value is None or isinstance(value, bool):
        return DEFAULT_RATING
    try:
        rating = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_RATING
    if not math.isfinite(rating):
        return DEFAULT_RATING
    return rating


def resolve_tone(rating: float) -> str:
    for matches, instruction in TONE_BANDS:
        if matches(rating):
            return instruction
    return ""


def format_rating(rating: float) -> str:
    """Render 5.0 as "5" and 4.5 as "4.5"."""
    if float(rating).is_integer():
        return str(int(rating))
    return str(rating)
