"""Sponsorship Pledges: linear money commitment per kilometre.

Invariants:
    - total = amount_per_km * distance, nothing else
    - No validation here: zero/negative operands are rejected at the API boundary
"""

from stridefund.core.domain_types import Kilometers, Money


def compute_total_amount(distance: Kilometers | float, amount_per_km: Money | float) -> Money:
    """Return the pledged total for `distance` km at `amount_per_km`."""
    return Money(amount_per_km * distance)
