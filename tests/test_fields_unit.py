import pytest

from core import (
    FieldValidationError,
    normalize_address,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_tag,
    normalize_year_joined,
)


def test_valid_values_are_stripped():
    assert normalize_name("  John Doe ") == "John Doe"
    assert normalize_phone(" 91234567") == "91234567"
    assert normalize_email("john@x.com ") == "john@x.com"
    assert normalize_address(" Blk 30, #06-40 ") == "Blk 30, #06-40"
    assert normalize_tag(" friend ") == "friend"
    assert normalize_year_joined("2024") == 2024


@pytest.mark.parametrize(
    "func, value, field",
    [
        (normalize_name, "", "name"),
        (normalize_name, "J@ne", "name"),
        (normalize_phone, "12", "phone"),
        (normalize_phone, "91a4567", "phone"),
        (normalize_email, "no-at-sign", "email"),
        (normalize_email, "@x.com", "email"),
        (normalize_address, "   ", "address"),
        (normalize_tag, "two words", "tag"),
        (normalize_tag, "", "tag"),
        (normalize_year_joined, "20x4", "year_joined"),
        (normalize_year_joined, 1999, "year_joined"),
    ],
)
def test_invalid_values_raise_with_field_name(func, value, field):
    with pytest.raises(FieldValidationError) as excinfo:
        func(value)
    assert excinfo.value.field_name == field
    assert isinstance(excinfo.value, ValueError)
