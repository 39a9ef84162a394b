"""Text formatting used by the templates (registered as Jinja2 filters)."""

from models import CALORIES_PER_POUND, DAYS_PER_WEEK, Goal, WeeklyRateGoal


def calories(value: int) -> str:
    """2902 -> '2,902'"""
    return f"{value:,}"


def one_decimal(value: float) -> str:
    return f"{value:.1f}"


def plain_number(value: float) -> str:
    # 2.0 -> '2', 1.5 -> '1.5'
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def describe_target_deficit(goal: Goal) -> str:
    if isinstance(goal, WeeklyRateGoal):
        rate = plain_number(goal.weekly_loss_lbs)
        return (
            f"To lose {rate} pounds per week, you need this daily deficit "
            f"({rate} lbs × {CALORIES_PER_POUND:,} calories ÷ {DAYS_PER_WEEK} days)."
        )
    lbs = plain_number(goal.weight_loss_goal)
    weeks = plain_number(goal.timeframe_weeks)
    days = plain_number(goal.timeframe_weeks * DAYS_PER_WEEK)
    return (
        f"To lose {lbs} pounds in {weeks} weeks, you need this daily deficit "
        f"({lbs} lbs × {CALORIES_PER_POUND:,} calories ÷ {days} days)."
    )


def describe_time_to_goal(goal: Goal) -> str:
    if isinstance(goal, WeeklyRateGoal):
        return "Based on your target weekly loss rate, this is your calculated timeframe."
    return "If you maintain this daily deficit, you'll hit your goal in this many weeks."


def register_filters(env) -> None:
    env.filters["calories"] = calories
    env.filters["one_decimal"] = one_decimal
    env.filters["plain_number"] = plain_number
    env.filters["target_deficit_note"] = describe_target_deficit
    env.filters["time_to_goal_note"] = describe_time_to_goal
