from typing import Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from config import APP_TITLE, TEMPLATES_DIR
from formatting import register_filters
from models import ActivityLevel, CalculatorInputs, Results

templates = Jinja2Templates(directory=TEMPLATES_DIR)
register_filters(templates.env)

DEFAULT_FORM = {
    "age": "30",
    "gender": "male",
    "weight": "180",
    "height_feet": "5",
    "height_inches": "10",
    "daily_calories": "2000",
    "activity_level": ActivityLevel.MODERATELY_ACTIVE.value,
    "weight_loss_goal": "20",
    "timeframe": "12",
    "weekly_loss_goal": "2",
    "calculation_method": "timeframe",
}


def render_calculator(
    request: Request,
    form: Dict[str, str],
    errors: Optional[Dict[str, str]] = None,
    status_code: int = 200,
    inputs: Optional[CalculatorInputs] = None,
    results: Optional[Results] = None,
):
    """
    Render the calculator page. With results it renders results.html, which
    extends the form page; otherwise form.html with any field errors.
    """
    return templates.TemplateResponse(
        request,
        "results.html" if results is not None else "form.html",
        {
            "title": APP_TITLE,
            "form": {**DEFAULT_FORM, **form},
            "errors": errors or {},
            "activity_levels": list(ActivityLevel),
            "inputs": inputs,
            "results": results,
        },
        status_code=status_code,
    )
