import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple

from logger import get_logger
from models import (
    CALORIES_PER_POUND,
    DAYS_PER_WEEK,
    RUNNING_CALORIES_PER_LB_MILE,
    WALKING_CALORIES_PER_LB_MILE,
    CalculatorInputs,
    Gender,
    Goal,
    Results,
    TimeframeGoal,
    WeeklyRateGoal,
)
from validation import ensure_finite, validate_inputs

logger = get_logger("calculator")


def round_half_up(value: float) -> int:
    """Nearest integer, ties toward +inf (-597.5 -> -597, 112.5 -> 113)."""
    return int(math.floor(value + 0.5))


def round_one_decimal(value: float) -> float:
    """One decimal place from the exact binary value, ties away from zero."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class EnergyBalanceCalculator:
    """
    Core logic:
    - Validate inputs at the boundary
    - Compute BMR (Harris-Benedict, lbs / inches)
    - Apply activity multiplier -> TDEE
    - Compare with current intake -> current daily deficit
    - Turn the goal (timeframe or weekly rate) into a target daily deficit
    - Cover the remaining gap with exercise, expressed as walking / running miles
    - Project weekly loss and time to goal

    All arithmetic runs at full precision; rounding happens once when the
    Results are built.
    """

    def _bmr(self, gender: Gender, age: int, weight_lb: float, height_in: float) -> float:
        if gender == Gender.MALE:
            return 66 + 6.23 * weight_lb + 12.7 * height_in - 6.8 * age
        return 655 + 4.35 * weight_lb + 4.7 * height_in - 4.7 * age

    def _target_deficit(self, goal: Goal) -> Tuple[float, float]:
        """
        Returns: (target_daily_deficit, timeframe_weeks)
        For a weekly rate the timeframe is derived from the rate; for a
        timeframe goal it is the entered timeframe.
        """
        if isinstance(goal, WeeklyRateGoal):
            target = goal.weekly_loss_lbs * CALORIES_PER_POUND / DAYS_PER_WEEK
            return target, goal.weight_loss_goal / goal.weekly_loss_lbs
        if isinstance(goal, TimeframeGoal):
            target = goal.weight_loss_goal * CALORIES_PER_POUND / (
                goal.timeframe_weeks * DAYS_PER_WEEK
            )
            return target, goal.timeframe_weeks
        raise TypeError(f"Unsupported goal type: {type(goal).__name__}")

    def compute(self, inputs: CalculatorInputs) -> Results:
        validate_inputs(inputs)

        # BMR / TDEE
        bmr = self._bmr(inputs.gender, inputs.age, inputs.weight, inputs.total_height_inches)
        tdee = bmr * inputs.activity_level.multiplier

        # Negative means a surplus; kept as-is in the output
        daily_deficit = tdee - inputs.daily_calories

        target_daily_deficit, timeframe_weeks = self._target_deficit(inputs.goal)

        # Diet deficit is credited first, exercise covers the rest
        diet_credit = max(0.0, daily_deficit)
        exercise_calories = max(0.0, target_daily_deficit - diet_credit)

        # Distance equivalents
        calories_per_mile_walking = inputs.weight * WALKING_CALORIES_PER_LB_MILE
        calories_per_mile_running = inputs.weight * RUNNING_CALORIES_PER_LB_MILE
        walking_miles = exercise_calories / calories_per_mile_walking
        running_miles = exercise_calories / calories_per_mile_running

        total_daily_deficit = diet_credit + exercise_calories
        projected_weekly_loss = total_daily_deficit * DAYS_PER_WEEK / CALORIES_PER_POUND

        if isinstance(inputs.goal, WeeklyRateGoal):
            time_to_goal = timeframe_weeks
        elif projected_weekly_loss > 0:
            time_to_goal = inputs.goal.weight_loss_goal / projected_weekly_loss
        else:
            time_to_goal = 0.0

        logger.debug(
            "bmr=%.2f tdee=%.2f deficit=%.2f target=%.2f exercise=%.2f weekly_loss=%.4f",
            bmr,
            tdee,
            daily_deficit,
            target_daily_deficit,
            exercise_calories,
            projected_weekly_loss,
        )

        ensure_finite(
            {
                "tdee": tdee,
                "daily_deficit": daily_deficit,
                "target_daily_deficit": target_daily_deficit,
                "exercise_calories": exercise_calories,
                "walking_miles": walking_miles,
                "running_miles": running_miles,
                "projected_weekly_loss": projected_weekly_loss,
                "time_to_goal": time_to_goal,
            }
        )

        return Results(
            tdee=round_half_up(tdee),
            daily_deficit=round_half_up(daily_deficit),
            target_daily_deficit=round_half_up(target_daily_deficit),
            exercise_calories=round_half_up(exercise_calories),
            walking_miles=round_one_decimal(walking_miles),
            running_miles=round_one_decimal(running_miles),
            projected_weekly_loss=round_one_decimal(projected_weekly_loss),
            time_to_goal=round_one_decimal(time_to_goal),
            calories_per_mile_walking=round_half_up(calories_per_mile_walking),
            calories_per_mile_running=round_half_up(calories_per_mile_running),
        )
