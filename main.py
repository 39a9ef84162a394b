from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse

from calculator import EnergyBalanceCalculator
from config import APP_TITLE, HOST, PORT
from error_handlers import register_exception_handlers
from exceptions import InvalidInputError
from formatting import plain_number
from logger import get_logger
from models import (
    ActivityLevel,
    CalculationMethod,
    CalculatorInputs,
    Gender,
    Goal,
    TimeframeGoal,
    WeeklyRateGoal,
)
from templating import render_calculator
from validation import parse_number

logger = get_logger("main")

app = FastAPI(title=APP_TITLE)
register_exception_handlers(app)

calculator = EnergyBalanceCalculator()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


def build_goal(
    method: CalculationMethod,
    weight_loss_goal: float,
    timeframe: Optional[str],
    weekly_loss_goal: Optional[str],
) -> Goal:
    """
    Only the field belonging to the selected method is parsed and ends up
    in the goal; the other one is ignored, whatever it contains.
    """
    if method == CalculationMethod.WEEKLY:
        weekly_loss_lbs = parse_number("weekly_loss_goal", weekly_loss_goal, "Target weekly loss")
        return WeeklyRateGoal(weight_loss_goal=weight_loss_goal, weekly_loss_lbs=weekly_loss_lbs)
    if method == CalculationMethod.TIMEFRAME:
        timeframe_weeks = parse_number("timeframe", timeframe, "Timeframe")
        return TimeframeGoal(weight_loss_goal=weight_loss_goal, timeframe_weeks=timeframe_weeks)
    raise ValueError(f"Unknown calculation method: {method!r}")


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return render_calculator(request, form={})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/calculate", response_class=HTMLResponse)
async def calculate_view(
    request: Request,
    age: int = Form(...),
    gender: Gender = Form(...),
    weight: float = Form(...),
    height_feet: int = Form(...),
    height_inches: int = Form(...),
    daily_calories: float = Form(...),
    activity_level: ActivityLevel = Form(...),
    weight_loss_goal: float = Form(...),
    timeframe: Optional[str] = Form(None),
    weekly_loss_goal: Optional[str] = Form(None),
    calculation_method: CalculationMethod = Form(...),
):
    # Echo the submitted values back into the form
    form = {
        "age": str(age),
        "gender": gender.value,
        "weight": plain_number(weight),
        "height_feet": str(height_feet),
        "height_inches": str(height_inches),
        "daily_calories": plain_number(daily_calories),
        "activity_level": activity_level.value,
        "weight_loss_goal": plain_number(weight_loss_goal),
        "timeframe": timeframe or "",
        "weekly_loss_goal": weekly_loss_goal or "",
        "calculation_method": calculation_method.value,
    }

    try:
        inputs = CalculatorInputs(
            age=age,
            gender=gender,
            weight=weight,
            height_feet=height_feet,
            height_inches=height_inches,
            daily_calories=daily_calories,
            activity_level=activity_level,
            goal=build_goal(calculation_method, weight_loss_goal, timeframe, weekly_loss_goal),
        )
        results = calculator.compute(inputs)
    except InvalidInputError as exc:
        logger.warning("Rejected input: %s (%s)", exc.message, exc.field)
        return render_calculator(
            request,
            form=form,
            errors={exc.field: exc.message},
            status_code=exc.status_code,
        )

    logger.info(
        "Calculated plan: method=%s target=%s exercise=%s weekly_loss=%s",
        calculation_method.value,
        results.target_daily_deficit,
        results.exercise_calories,
        results.projected_weekly_loss,
    )

    return render_calculator(request, form=form, inputs=inputs, results=results)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=HOST, port=PORT)
