"""
Validator tests - pure payload checks, no database.
"""
import pytest

from inventory_api.exceptions import ValidationError, Violation
from inventory_api.schemas.inventory_item import InventoryItemCreate
from inventory_api.utils.validators import (
    describe_request_errors,
    parse_payload,
    validate_category_create,
    validate_category_update,
    validate_item_create,
    validate_item_update,
    validate_supplier_create,
)


def _category(**overrides):
    data = {
        "categoryId": 1,
        "categoryName": "Next Big Thing",
        "description": "Would make Steve proud.",
    }
    data.update(overrides)
    return data


def _supplier(**overrides):
    data = {
        "supplierName": "Acme Toys",
        "contactInformation": "402-555-1234",
        "address": "123 Main St",
    }
    data.update(overrides)
    return data


def _item(**overrides):
    data = {
        "categoryId": 5000,
        "supplierId": 5,
        "name": "Hungry Hippos",
        "description": "Have your hippo eat the most marbles to win.",
        "quantity": 7,
        "price": 18.98,
        "dateCreated": "2024-09-04T21:39:36.605Z",
    }
    data.update(overrides)
    return data


# ===================== CATEGORY =====================


@pytest.mark.parametrize("length", [1, 100])
def test_category_name_length_bounds_accepted(length):
    assert validate_category_create(_category(categoryName="X" * length)) == []


def test_category_name_empty_rejected():
    violations = validate_category_create(_category(categoryName=""))
    assert [v.field for v in violations] == ["categoryName"]
    assert violations[0].message == "Category categoryName must be at least 1 character"


def test_category_name_too_long_rejected():
    violations = validate_category_create(_category(categoryName="X" * 101))
    assert [v.field for v in violations] == ["categoryName"]
    assert violations[0].message == "Category categoryName cannot exceed 100 characters"


def test_category_missing_required_fields():
    violations = validate_category_create({"dateCreated": "2021-01-01T00:00:00.000Z"})
    fields = {v.field for v in violations}
    assert fields == {"categoryId", "categoryName", "description"}
    assert "Category categoryId is required" in [v.message for v in violations]


def test_category_update_is_partial():
    assert validate_category_update({"description": "Too Cool"}) == []
    violations = validate_category_update({"description": "X" * 501})
    assert [v.field for v in violations] == ["description"]


# ===================== SUPPLIER =====================


def test_supplier_valid_payload():
    assert validate_supplier_create(_supplier()) == []


def test_supplier_id_in_payload_is_ignored():
    assert validate_supplier_create(_supplier(supplierId=3)) == []


@pytest.mark.parametrize("contact, expected", [
    ("402-555-123", "Supplier contactInformation must be at least 12 characters"),
    ("402-555-12345", "Supplier contactInformation cannot exceed 12 characters"),
])
def test_supplier_contact_must_be_exactly_12(contact, expected):
    violations = validate_supplier_create(_supplier(contactInformation=contact))
    assert [v.message for v in violations] == [expected]


def test_supplier_all_empty_reports_every_field():
    violations = validate_supplier_create(
        {"supplierName": "", "contactInformation": "", "address": ""}
    )
    assert {v.field for v in violations} == {"supplierName", "contactInformation", "address"}


# ===================== INVENTORY ITEM =====================


def test_item_valid_payload():
    assert validate_item_create(_item()) == []


def test_item_negative_quantity():
    violations = validate_item_create(_item(quantity=-1))
    assert [v.message for v in violations] == ["Negative quantity is not allowed: -1"]


def test_item_negative_price():
    violations = validate_item_create(_item(price=-1.5))
    assert [v.message for v in violations] == ["Negative price is not allowed: -1.5"]


@pytest.mark.parametrize("price", [float("inf"), float("-inf"), float("nan")])
def test_item_price_must_be_finite(price):
    violations = validate_item_create(_item(price=price))
    assert {v.field for v in violations} == {"price"}


def test_item_price_infinity_message():
    violations = validate_item_create(_item(price=float("inf")))
    assert [v.message for v in violations] == ["Item price must be a finite number"]


def test_item_price_at_most_two_decimal_places():
    violations = validate_item_create(_item(price=18.987))
    assert [v.message for v in violations] == ["Item price cannot have more than 2 decimal places"]
    assert validate_item_create(_item(price=18.9)) == []


def test_item_price_fits_the_column():
    assert validate_item_create(_item(price=9_999_999_999.99)) == []
    violations = validate_item_create(_item(price=10_000_000_000.0))
    assert [v.field for v in violations] == ["price"]
    assert "cannot exceed" in violations[0].message


def test_item_quantity_fits_the_column():
    violations = validate_item_create(_item(quantity=2**31))
    assert [v.field for v in violations] == ["quantity"]


def test_update_profile_checks_price_too():
    payload = _item(price=1.001)
    del payload["dateCreated"]
    assert [v.field for v in validate_item_update(payload)] == ["price"]


def test_item_zero_quantity_and_price_allowed():
    assert validate_item_create(_item(quantity=0, price=0.0)) == []


def test_item_ids_must_be_numbers():
    violations = validate_item_create(_item(categoryId="5000"))
    assert [v.field for v in violations] == ["categoryId"]


def test_item_date_created_format():
    violations = validate_item_create(_item(dateCreated="not-a-date"))
    assert [v.field for v in violations] == ["dateCreated"]
    assert validate_item_create(_item(dateCreated="")) == []


def test_item_create_requires_date_created():
    payload = _item()
    del payload["dateCreated"]
    violations = validate_item_create(payload)
    assert [v.message for v in violations] == ["Item dateCreated is required"]


def test_item_update_requires_core_fields():
    violations = validate_item_update({"quantity": 4})
    assert {v.field for v in violations} == {
        "categoryId", "supplierId", "name", "description", "price",
    }


def test_item_update_quantity_optional():
    payload = _item()
    del payload["quantity"]
    del payload["dateCreated"]
    assert validate_item_update(payload) == []


def test_non_object_payload():
    violations = validate_item_create(["not", "an", "object"])
    assert violations[0].field == "body"


# ===================== parse_payload =====================


def test_parse_payload_returns_model():
    item = parse_payload(InventoryItemCreate, "Item", _item())
    assert item.category_id == 5000
    assert item.name == "Hungry Hippos"


def test_parse_payload_aggregates_violations():
    with pytest.raises(ValidationError) as exc_info:
        parse_payload(InventoryItemCreate, "Item", _item(name="", quantity=-2))

    err = exc_info.value
    assert err.fields == {"name", "quantity"}
    assert err.to_dict()["errors"][0]["field"] in {"name", "quantity"}
    assert "Negative quantity is not allowed: -2" in err.message


# ===================== request errors =====================


def test_describe_request_errors_json_invalid():
    violations = describe_request_errors([
        {"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error", "input": {}},
    ])
    assert violations == [Violation(field="body", message="Request body is not valid JSON")]


def test_describe_request_errors_strips_location_prefix():
    violations = describe_request_errors([
        {"type": "int_parsing", "loc": ("query", "limit"), "msg": "Input should be a valid integer"},
    ])
    assert violations[0].field == "limit"
