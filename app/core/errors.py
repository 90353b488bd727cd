"""HTTP-level exceptions and the handlers that render them."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response


class GateRejection(Exception):
    """Raised by an auth gate to end the request with a bare status code (no body)."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Request rejected with status {status_code}")


class ApiError(Exception):
    """Raised by a handler to end the request with a JSON {"message": ...} body."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def gate_rejection_handler(request: Request, exc: GateRejection) -> Response:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return Response(status_code=exc.status_code, headers=headers)


def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GateRejection, gate_rejection_handler)
    app.add_exception_handler(ApiError, api_error_handler)
