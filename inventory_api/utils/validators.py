"""
Input validation utilities.

Each validate_* function is pure: it checks a raw request payload against
one entity profile and returns the list of field-level violations (empty
when the payload is acceptable). parse_payload() does the same check and
either returns the parsed model or raises a single ValidationError carrying
every violation.
"""
from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inventory_api.exceptions import ValidationError, Violation
from inventory_api.schemas.category import CategoryCreate, CategoryUpdate
from inventory_api.schemas.supplier import SupplierCreate, SupplierUpdate
from inventory_api.schemas.inventory_item import InventoryItemCreate, InventoryItemUpdate

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def _plural(n: int) -> str:
    return "character" if n == 1 else "characters"


def _describe(entity: str, error: dict) -> Violation:
    """Turn one pydantic error into a human-readable field violation."""
    field = _field_path(error.get("loc", ()))
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        message = f"{entity} {field} is required"
    elif kind == "string_too_short":
        n = ctx.get("min_length", 1)
        message = f"{entity} {field} must be at least {n} {_plural(n)}"
    elif kind == "string_too_long":
        n = ctx.get("max_length")
        message = f"{entity} {field} cannot exceed {n} {_plural(n)}"
    elif kind == "greater_than_equal":
        message = f"Negative {field} is not allowed: {error.get('input')}"
    elif kind == "less_than_equal":
        message = f"{entity} {field} cannot exceed {ctx.get('le')}"
    elif kind == "finite_number":
        message = f"{entity} {field} must be a finite number"
    elif kind == "decimal_max_places":
        message = f"{entity} {field} cannot have more than {ctx.get('decimal_places')} decimal places"
    elif kind == "json_invalid":
        message = "Request body is not valid JSON"
    elif kind == "string_pattern_mismatch":
        message = f"{entity} {field} must be an ISO-8601 timestamp (YYYY-MM-DDTHH:MM:SS.sssZ)"
    elif kind == "model_type":
        message = f"{entity} payload must be a JSON object"
    else:
        message = f"{entity} {field}: {error['msg']}"

    return Violation(field=field, message=message)


def describe_request_errors(errors: list[dict]) -> list[Violation]:
    """
    Violations for errors FastAPI raised before the payload reached a
    service (malformed JSON, bad query values). The leading "body" / "query"
    segment of each location is dropped; a JSON decode error points at "body".
    """
    violations = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid":
            loc = ()
        elif loc and loc[0] in ("body", "query", "header"):
            loc = loc[1:]
        violations.append(_describe("Request", {**error, "loc": loc}))
    return violations


def collect_violations(schema: Type[BaseModel], entity: str, payload: Any) -> list[Violation]:
    try:
        schema.model_validate(payload)
    except PydanticValidationError as exc:
        return [_describe(entity, err) for err in exc.errors()]
    return []


def parse_payload(schema: Type[SchemaT], entity: str, payload: Any) -> SchemaT:
    """Validate payload against schema, raising ValidationError with all violations."""
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError([_describe(entity, err) for err in exc.errors()]) from exc


def validate_category_create(payload: Any) -> list[Violation]:
    return collect_violations(CategoryCreate, "Category", payload)


def validate_category_update(payload: Any) -> list[Violation]:
    return collect_violations(CategoryUpdate, "Category", payload)


def validate_supplier_create(payload: Any) -> list[Violation]:
    return collect_violations(SupplierCreate, "Supplier", payload)


def validate_supplier_update(payload: Any) -> list[Violation]:
    return collect_violations(SupplierUpdate, "Supplier", payload)


def validate_item_create(payload: Any) -> list[Violation]:
    return collect_violations(InventoryItemCreate, "Item", payload)


def validate_item_update(payload: Any) -> list[Violation]:
    return collect_violations(InventoryItemUpdate, "Item", payload)
