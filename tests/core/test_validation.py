"""Input Validation: distances and required text checked before any write."""

import pytest

from stridefund.core.errors import InvalidInputError
from stridefund.core.validation import (
    validate_activity_distances, validate_finish_amounts, validate_text,
)


def test_positive_distances_pass():
    validate_activity_distances(10.0, 0.5)


@pytest.mark.parametrize("to_cover,covered,field", [
    (0.0, 5.0, "distance_to_cover"),
    (-1.0, 5.0, "distance_to_cover"),
    (10.0, 0.0, "distance_covered"),
    (10.0, -3.2, "distance_covered"),
])
def test_non_positive_distance_names_field(to_cover, covered, field):
    with pytest.raises(InvalidInputError) as exc:
        validate_activity_distances(to_cover, covered)
    assert exc.value.field == field
    assert exc.value.code == "INVALID_INPUT"
    assert exc.value.context.operation == "record_cause_activity"


def test_validate_text_strips():
    assert validate_text("  hello ", "title", "create_post") == "hello"


@pytest.mark.parametrize("value", ["", "   ", None])
def test_validate_text_rejects_blank(value):
    with pytest.raises(InvalidInputError) as exc:
        validate_text(value, "title", "create_post")
    assert exc.value.field == "title"


def test_finish_allows_zero_money():
    validate_finish_amounts(3.0, 0.0)


@pytest.mark.parametrize("distance,money,field", [
    (0.0, 5.0, "distance_covered"),
    (-2.0, 0.0, "distance_covered"),
    (4.0, -1.0, "money_raised"),
])
def test_finish_rejects_bad_amounts(distance, money, field):
    with pytest.raises(InvalidInputError) as exc:
        validate_finish_amounts(distance, money)
    assert exc.value.field == field
    assert exc.value.context.operation == "finish_activity"
