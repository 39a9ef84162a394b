"""
Boundary checks run once before (and after) the formula pipeline, so the
pipeline itself only ever sees in-domain values.
"""

import math
from typing import Dict, Optional

from exceptions import InvalidInputError
from models import CalculatorInputs, TimeframeGoal, WeeklyRateGoal


def _require_finite(field: str, value: float) -> None:
    try:
        finite = math.isfinite(value)
    except OverflowError:
        # int too large for a float
        finite = False
    if not finite:
        raise InvalidInputError(field, f"{field} must be a finite number.")


def _require_positive(field: str, value: float, label: str) -> None:
    _require_finite(field, value)
    if value <= 0:
        raise InvalidInputError(field, f"{label} must be greater than zero.")


def _require_non_negative(field: str, value: float, label: str) -> None:
    _require_finite(field, value)
    if value < 0:
        raise InvalidInputError(field, f"{label} cannot be negative.")


def validate_inputs(inputs: CalculatorInputs) -> None:
    """
    Raise InvalidInputError naming the first offending field.
    Field names match the form field names of the web layer.
    """
    _require_positive("age", inputs.age, "Age")
    _require_positive("weight", inputs.weight, "Weight")
    _require_non_negative("height_feet", inputs.height_feet, "Height (feet)")
    _require_non_negative("height_inches", inputs.height_inches, "Height (inches)")
    _require_finite("height_feet", inputs.total_height_inches)
    if inputs.total_height_inches <= 0:
        raise InvalidInputError("height_feet", "Height must be greater than zero.")
    _require_non_negative("daily_calories", inputs.daily_calories, "Daily calorie intake")

    goal = inputs.goal
    if not isinstance(goal, (TimeframeGoal, WeeklyRateGoal)):
        raise TypeError(f"Unsupported goal type: {type(goal).__name__}")
    _require_positive("weight_loss_goal", goal.weight_loss_goal, "Weight loss goal")
    if isinstance(goal, TimeframeGoal):
        _require_positive("timeframe", goal.timeframe_weeks, "Timeframe")
    else:
        _require_positive("weekly_loss_goal", goal.weekly_loss_lbs, "Target weekly loss")


def ensure_finite(values: Dict[str, float]) -> Dict[str, float]:
    """Reject infinite / NaN outputs instead of handing them to the caller."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(name, f"Inputs produce an undefined {name}.")
    return values


def parse_number(field: str, raw: Optional[str], label: str) -> float:
    """Parse a form value that is only required in some modes."""
    if raw is None or not raw.strip():
        raise InvalidInputError(field, f"{label} is required.")
    try:
        return float(raw)
    except ValueError:
        raise InvalidInputError(field, f"{label} must be a number.") from None
