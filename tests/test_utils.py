"""Unit tests for visa_guide.utils."""

from visa_guide.utils import (
    find_country,
    flag_emoji,
    format_friendly_date,
    to_route_key,
    visa_category_label,
    visa_type_label,
)


def test_to_route_key_uppercases_codes():
    assert to_route_key("fr", "us") == "FR->US"
    assert to_route_key("FR", None) == ""


def test_find_country_by_code_name_or_label():
    assert find_country("fr").name == "France"
    assert find_country(" United States ").code == "US"
    assert find_country("japan (jp)").code == "JP"
    assert find_country("Atlantis") is None
    assert find_country("") is None


def test_flag_emoji():
    assert flag_emoji("fr") == "\U0001F1EB\U0001F1F7"
    assert flag_emoji("XK") == "\U0001F1FD\U0001F1F0"
    assert flag_emoji("USA") == "\U0001F3F3\uFE0F"
    assert flag_emoji(None) == ""


def test_labels_fall_back_to_check_requirements():
    assert visa_type_label("evisa") == "eVisa"
    assert visa_type_label(None) == "Check requirements"
    assert visa_category_label("e_visa") == "eVisa"
    assert visa_category_label("no_admission") == "No admission"
    assert visa_category_label("unknown") == "Check requirements"


def test_format_friendly_date():
    assert format_friendly_date("2025-01-15") == "Wednesday Jan 15 2025"
    assert format_friendly_date("soon") == "soon"
