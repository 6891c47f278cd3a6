"""Input Validation: checks applied before any write reaches storage.

Invariants:
    - distance_to_cover and distance_covered must both be strictly positive
    - A finished campaign run adds a strictly positive distance and non-negative money
    - Required text fields are stripped and must be non-empty
    - Raises InvalidInputError naming the offending field; never touches storage
"""

from stridefund.core.errors import InvalidInputError, ErrorContext


def validate_activity_distances(distance_to_cover: float, distance_covered: float) -> None:
    """Reject non-positive distances for a recorded activity."""
    for name, value in (
        ("distance_to_cover", distance_to_cover),
        ("distance_covered", distance_covered),
    ):
        if value is None or value <= 0:
            raise InvalidInputError(
                f"{name} must be greater than 0",
                field=name,
                context=ErrorContext(operation="record_cause_activity"),
            )


def validate_finish_amounts(distance_covered: float, money_raised: float) -> None:
    """Reject a campaign finish that adds no distance or removes money."""
    if distance_covered is None or distance_covered <= 0:
        raise InvalidInputError(
            "distance_covered must be greater than 0",
            field="distance_covered",
            context=ErrorContext(operation="finish_activity"),
        )
    if money_raised is None or money_raised < 0:
        raise InvalidInputError(
            "money_raised cannot be negative",
            field="money_raised",
            context=ErrorContext(operation="finish_activity"),
        )

def validate_text(value: str | None, field: str, operation: str) -> str:
    """Strip a required text field and reject it when blank."""
    stripped = (value or "").strip()
    if not stripped:
        raise InvalidInputError(
            f"{field} cannot be empty",
            field=field,
            context=ErrorContext(operation=operation),
        )
    return stripped
