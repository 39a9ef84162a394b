from dataclasses import dataclass
from enum import Enum
from typing import Union


CALORIES_PER_POUND = 3500
DAYS_PER_WEEK = 7

# kcal burned per mile, per lb of body weight
WALKING_CALORIES_PER_LB_MILE = 0.57
RUNNING_CALORIES_PER_LB_MILE = 0.75

EXTREME_DEFICIT_THRESHOLD = 2000


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """
    Activity multipliers applied to BMR. The value is the multiplier text
    posted by the form, so only these five multipliers are reachable.
    """

    SEDENTARY = "1.2"
    LIGHTLY_ACTIVE = "1.375"
    MODERATELY_ACTIVE = "1.55"
    VERY_ACTIVE = "1.725"
    EXTREMELY_ACTIVE = "1.9"

    @property
    def multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS[self]

    @property
    def label(self) -> str:
        return ACTIVITY_LABELS[self]


ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

ACTIVITY_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary (desk job, no exercise)",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly Active (1–2x/week)",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately Active (3–4x/week)",
    ActivityLevel.VERY_ACTIVE: "Very Active (5–6x/week)",
    ActivityLevel.EXTREMELY_ACTIVE: "Extremely Active (2-a-day workouts)",
}


class CalculationMethod(str, Enum):
    TIMEFRAME = "timeframe"
    WEEKLY = "weekly"


@dataclass(frozen=True)
class TimeframeGoal:
    """Lose `weight_loss_goal` lbs within `timeframe_weeks` weeks."""

    weight_loss_goal: float
    timeframe_weeks: float

    method = CalculationMethod.TIMEFRAME


@dataclass(frozen=True)
class WeeklyRateGoal:
    """Lose `weight_loss_goal` lbs at `weekly_loss_lbs` lbs per week."""

    weight_loss_goal: float
    weekly_loss_lbs: float

    method = CalculationMethod.WEEKLY


Goal = Union[TimeframeGoal, WeeklyRateGoal]


@dataclass(frozen=True)
class CalculatorInputs:
    age: int
    gender: Gender
    weight: float              # lbs
    height_feet: int
    height_inches: int
    daily_calories: float      # current average intake, kcal/day
    activity_level: ActivityLevel
    goal: Goal

    @property
    def total_height_inches(self) -> float:
        return self.height_feet * 12 + self.height_inches

    @property
    def calculation_method(self) -> CalculationMethod:
        return self.goal.method


@dataclass(frozen=True)
class Results:
    tdee: int
    daily_deficit: int
    target_daily_deficit: int
    exercise_calories: int
    walking_miles: float
    running_miles: float
    projected_weekly_loss: float
    time_to_goal: float
    calories_per_mile_walking: int
    calories_per_mile_running: int

    @property
    def is_extreme_deficit(self) -> bool:
        return self.target_daily_deficit > EXTREME_DEFICIT_THRESHOLD
