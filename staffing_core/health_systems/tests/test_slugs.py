# staffing_core/health_systems/tests/test_slugs.py
import pytest

from staffing_core.health_systems.slugs import slugify_name


@pytest.mark.parametrize(
    "name,expected",
    [
        ("St. Mary's Hospital!!", "st-marys-hospital"),
        ("Metro Health", "metro-health"),
        ("  --Valley   Care--  ", "valley-care"),
        ("Hôpital Général", "hopital-general"),
        ("!!!", ""),
    ],
)
def test_slugify_name(name, expected):
    assert slugify_name(name) == expected
