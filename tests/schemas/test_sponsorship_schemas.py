"""Sponsorship Schemas: pledge operands must be strictly positive."""

import pytest
from pydantic import ValidationError

from stridefund.schemas.sponsorship import (
    SponsorCauseRequest, SponsorChallengeRequest, SponsorshipUpdate,
)


def test_challenge_pledge_accepts_positive_operands():
    body = SponsorChallengeRequest(challenge_id="ch1", distance=10.5, amount_per_km=5.0)
    assert body.brand_img is None


@pytest.mark.parametrize("distance,rate", [(0, 5.0), (10.5, 0), (-1, 5.0)])
def test_cause_pledge_rejects_non_positive_operands(distance, rate):
    with pytest.raises(ValidationError):
        SponsorCauseRequest(cause_id="c1", distance=distance, amount_per_km=rate)


def test_pledge_total_is_not_client_settable():
    body = SponsorChallengeRequest(
        challenge_id="ch1", distance=1, amount_per_km=1, total_amount=999,
    )
    assert "total_amount" not in body.model_dump()


def test_update_rejects_zero_distance():
    with pytest.raises(ValidationError):
        SponsorshipUpdate(distance=0)


def test_update_exclude_unset():
    assert SponsorshipUpdate(amount_per_km=2.5).model_dump(exclude_unset=True) == {
        "amount_per_km": 2.5,
    }
