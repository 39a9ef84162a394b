"""Exception handlers for the FastAPI app.

Malformed form fields (non-numeric text, unknown options) are turned back
into the calculator form with one message per field instead of JSON.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from logger import get_logger
from templating import render_calculator

logger = get_logger("error_handlers")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Re-render the form with field-level guidance.

    Args:
        request: FastAPI request object.
        exc: Request validation error raised while parsing the form.

    Returns:
        The form page with status 422.
    """
    errors = {}
    for error in exc.errors():
        field = str(error["loc"][-1]) if error.get("loc") else "form"
        errors.setdefault(field, error["msg"])

    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        errors,
    )

    body = exc.body if hasattr(exc.body, "keys") else {}
    form = {key: str(body[key]) for key in body.keys()}
    return render_calculator(
        request,
        form=form,
        errors=errors,
        status_code=422,
    )


def register_exception_handlers(app):
    """Register the exception handlers with the FastAPI app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    logger.info("Exception handlers registered")
