"""Exception handlers: InventoryError and request parsing failures to JSON bodies."""
import uuid

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from inventory_api.exceptions import InventoryError, NotFoundError, ValidationError
from inventory_api.utils.logger import get_logger
from inventory_api.utils.validators import describe_request_errors

logger = get_logger("inventory_api.errors")


def _error_response(exc: InventoryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app):
    @app.exception_handler(InventoryError)
    async def inventory_error(request: Request, exc: InventoryError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        # A path id that cannot even be parsed matches no record
        if any(err.get("loc") and err["loc"][0] == "path" for err in errors):
            return _error_response(NotFoundError("Not found"))
        return _error_response(ValidationError(describe_request_errors(errors)))

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):  # noqa: BLE001
        correlation_id = uuid.uuid4().hex
        logger.exception("Unhandled error cid=%s path=%s method=%s", correlation_id, request.url.path, request.method)
        return JSONResponse(status_code=500, content={"message": "Internal server error", "cid": correlation_id})

    return app
