from fastapi import FastAPI

from autopaginate.core.errors.exceptions import CoreException, InvalidInputException
from autopaginate.core.errors.handlers import (
    CoreExceptionHandler,
    InvalidInputExceptionHandler,
    as_exception_handler,
)


def include_exceptions_handlers(app: FastAPI) -> None:
    """
    Registers exception handlers for the pagination exceptions with the provided
    FastAPI application instance.

    Parameters:
        app (FastAPI): The FastAPI application instance to which the exception handlers
        will be added.

    Returns:
        None
    """
    app.add_exception_handler(
        InvalidInputException,
        as_exception_handler(InvalidInputExceptionHandler()),
    )
    app.add_exception_handler(
        CoreException,
        as_exception_handler(CoreExceptionHandler()),
    )
