"""Tests for the energy-balance pipeline."""
import pytest

import math

from calculator import EnergyBalanceCalculator, round_half_up, round_one_decimal
from models import (
    ActivityLevel,
    CalculationMethod,
    CalculatorInputs,
    Gender,
    Results,
    TimeframeGoal,
    WeeklyRateGoal,
)

calculator = EnergyBalanceCalculator()


def make_inputs(**overrides):
    values = dict(
        age=30,
        gender=Gender.MALE,
        weight=180,
        height_feet=5,
        height_inches=10,
        daily_calories=2000,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        goal=TimeframeGoal(weight_loss_goal=20, timeframe_weeks=12),
    )
    values.update(overrides)
    return CalculatorInputs(**values)


def test_reference_scenario_timeframe_mode():
    """Male, 30y, 180 lb, 5'10", 2000 kcal, moderately active, 20 lb in 12 weeks."""
    res = calculator.compute(make_inputs())
    assert res == Results(
        tdee=2902,
        daily_deficit=902,
        target_daily_deficit=833,
        exercise_calories=0,
        walking_miles=0.0,
        running_miles=0.0,
        projected_weekly_loss=1.8,
        time_to_goal=11.1,
        calories_per_mile_walking=103,
        calories_per_mile_running=135,
    )
    assert not res.is_extreme_deficit


def test_weekly_mode_exercise_covers_remaining_gap():
    res = calculator.compute(make_inputs(goal=WeeklyRateGoal(weight_loss_goal=20, weekly_loss_lbs=2)))
    assert res.target_daily_deficit == 1000
    # 1000 - 902.2 left for exercise
    assert res.exercise_calories == 98
    assert res.walking_miles == 1.0
    assert res.running_miles == 0.7
    assert res.projected_weekly_loss == 2.0
    assert res.time_to_goal == 10.0


def test_weekly_mode_time_to_goal_is_derived_from_rate():
    """Time to goal follows the entered rate even when the diet alone exceeds it."""
    res = calculator.compute(make_inputs(goal=WeeklyRateGoal(weight_loss_goal=20, weekly_loss_lbs=1.5)))
    assert res.target_daily_deficit == 750
    assert res.exercise_calories == 0
    assert res.projected_weekly_loss == 1.8
    assert res.time_to_goal == 13.3


def test_surplus_is_not_credited():
    res = calculator.compute(make_inputs(daily_calories=3500))
    assert res.daily_deficit == -598
    assert res.exercise_calories == 833
    assert res.walking_miles == 8.1
    assert res.running_miles == 6.2
    assert res.projected_weekly_loss == 1.7
    assert res.time_to_goal == 12.0


def test_female_formula():
    res = calculator.compute(
        make_inputs(
            age=25,
            gender=Gender.FEMALE,
            weight=140,
            height_feet=5,
            height_inches=4,
            daily_calories=1800,
            activity_level=ActivityLevel.SEDENTARY,
            goal=TimeframeGoal(weight_loss_goal=10, timeframe_weeks=10),
        )
    )
    assert res.tdee == 1737
    assert res.daily_deficit == -63
    assert res.target_daily_deficit == 500
    assert res.exercise_calories == 500
    assert res.calories_per_mile_walking == 80
    assert res.calories_per_mile_running == 105
    assert res.walking_miles == 6.3
    assert res.running_miles == 4.8
    assert res.projected_weekly_loss == 1.0
    assert res.time_to_goal == 10.0


def test_activity_level_scales_tdee():
    sedentary = calculator.compute(make_inputs(activity_level=ActivityLevel.SEDENTARY))
    extreme = calculator.compute(make_inputs(activity_level=ActivityLevel.EXTREMELY_ACTIVE))
    # BMR 1872.4
    assert sedentary.tdee == 2247
    assert extreme.tdee == 3558


def test_compute_is_deterministic():
    inputs = make_inputs(goal=WeeklyRateGoal(weight_loss_goal=15, weekly_loss_lbs=1.25))
    assert calculator.compute(inputs) == calculator.compute(inputs)


@pytest.mark.parametrize("gender", list(Gender))
@pytest.mark.parametrize("daily_calories", [0, 1500, 2500, 4500])
@pytest.mark.parametrize(
    "goal",
    [
        TimeframeGoal(weight_loss_goal=20, timeframe_weeks=12),
        TimeframeGoal(weight_loss_goal=5, timeframe_weeks=30),
        WeeklyRateGoal(weight_loss_goal=20, weekly_loss_lbs=0.5),
        WeeklyRateGoal(weight_loss_goal=40, weekly_loss_lbs=3),
    ],
)
def test_outputs_are_non_negative_and_credit_invariant_holds(gender, daily_calories, goal):
    res = calculator.compute(make_inputs(gender=gender, daily_calories=daily_calories, goal=goal))

    assert res.exercise_calories >= 0
    assert res.walking_miles >= 0
    assert res.running_miles >= 0
    assert res.projected_weekly_loss >= 0
    assert res.walking_miles >= res.running_miles

    expected = (max(0, res.daily_deficit) + res.exercise_calories) * 7 / 3500
    assert res.projected_weekly_loss == pytest.approx(expected, abs=0.06)


@pytest.mark.parametrize("weeks,lbs", [(12, 20), (8, 10), (26, 35), (3, 1)])
def test_timeframe_mode_target(weeks, lbs):
    res = calculator.compute(make_inputs(goal=TimeframeGoal(weight_loss_goal=lbs, timeframe_weeks=weeks)))
    assert res.target_daily_deficit == math.floor(lbs * 3500 / (7 * weeks) + 0.5)


@pytest.mark.parametrize("rate", [0.5, 1, 1.5, 2, 2.5])
def test_weekly_mode_target(rate):
    res = calculator.compute(make_inputs(goal=WeeklyRateGoal(weight_loss_goal=30, weekly_loss_lbs=rate)))
    assert res.target_daily_deficit == math.floor(rate * 3500 / 7 + 0.5)
    assert res.time_to_goal == round_one_decimal(30 / rate)


def test_extreme_deficit_flag():
    above = calculator.compute(make_inputs(goal=WeeklyRateGoal(weight_loss_goal=20, weekly_loss_lbs=5)))
    exactly = calculator.compute(make_inputs(goal=WeeklyRateGoal(weight_loss_goal=20, weekly_loss_lbs=4)))
    assert above.target_daily_deficit == 2500
    assert above.is_extreme_deficit
    assert exactly.target_daily_deficit == 2000
    assert not exactly.is_extreme_deficit


def test_goal_variant_selects_calculation_method():
    assert make_inputs().calculation_method == CalculationMethod.TIMEFRAME
    weekly = make_inputs(goal=WeeklyRateGoal(weight_loss_goal=20, weekly_loss_lbs=2))
    assert weekly.calculation_method == CalculationMethod.WEEKLY
    assert make_inputs().total_height_inches == 70


def test_unknown_goal_type_fails_fast():
    with pytest.raises(TypeError):
        calculator.compute(make_inputs(goal=("weekly", 20, 2)))


def test_activity_levels_map_to_fixed_multipliers():
    assert [level.multiplier for level in ActivityLevel] == [1.2, 1.375, 1.55, 1.725, 1.9]
    assert ActivityLevel("1.55") is ActivityLevel.MODERATELY_ACTIVE
    with pytest.raises(ValueError):
        ActivityLevel("1.6")


def test_exact_halves_round_up():
    """150 lb runs at exactly 112.5 cal/mile; 1 lb in 40 weeks needs exactly 12.5 kcal/day."""
    res = calculator.compute(
        make_inputs(weight=150, goal=TimeframeGoal(weight_loss_goal=1, timeframe_weeks=40))
    )
    assert res.calories_per_mile_running == 113
    assert res.target_daily_deficit == 13


def test_rounding_helpers():
    assert round_half_up(112.5) == 113
    assert round_half_up(12.5) == 13
    assert round_half_up(-597.5) == -597
    assert round_half_up(-597.78) == -598
    assert round_half_up(2902.22) == 2902
    assert round_one_decimal(0.25) == 0.3
    assert round_one_decimal(1.8044) == 1.8
    assert round_one_decimal(11.0837) == 11.1
    assert round_one_decimal(0.0) == 0.0
