import pytest
from flagbind.core.common.naming import to_camel_case, to_field_key


@pytest.mark.parametrize(
    "name, expected",
    [
        ("max_size", "MaxSize"),
        ("source", "Source"),
        ("MAX_SIZE", "MaxSize"),
        ("unknown_key", "UnknownKey"),
        ("maxSize", "Maxsize"),
        ("_leading", "Leading"),
        ("double__underscore", "DoubleUnderscore"),
        ("v2_api", "V2Api"),
        ("", ""),
    ],
)
def test_to_camel_case(name: str, expected: str) -> None:
    assert to_camel_case(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("max_size", "MaxSize"),
        ("MaxSize", "MaxSize"),
        ("maxSize", "MaxSize"),
        ("_secret", "Secret"),
    ],
)
def test_to_field_key(name: str, expected: str) -> None:
    assert to_field_key(name) == expected


def test_keys_and_snake_case_fields_agree() -> None:
    for name in ("source", "max_size", "skip_first_line"):
        assert to_camel_case(name) == to_field_key(name)
