from fastapi import FastAPI

from autopaginate.core.errors.exceptions import CoreException, InvalidInputException
from autopaginate.main.presentation import include_exceptions_handlers


def test_include_exceptions_handlers_registers_pagination_errors() -> None:
    app = FastAPI()

    include_exceptions_handlers(app)

    assert InvalidInputException in app.exception_handlers
    assert CoreException in app.exception_handlers
