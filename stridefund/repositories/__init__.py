"""Repositories: SQLAlchemy AsyncSession implementations of core/repository_protocols.py.

Invariants:
    - Each write commits on its own and refreshes the returned row
    - Unique-index violations surface as ConflictError, never IntegrityError
"""

from stridefund.repositories.user_repository import SqlUserRepository  # noqa: F401
from stridefund.repositories.challenge_repository import SqlChallengeRepository  # noqa: F401
from stridefund.repositories.cause_repository import SqlCauseRepository  # noqa: F401
from stridefund.repositories.cause_runner_repository import SqlCauseRunnerRepository  # noqa: F401
from stridefund.repositories.sponsorship_repository import (  # noqa: F401
    SqlSponsorChallengeRepository, SqlSponsorCauseRepository,
    SqlSponsorCampaignRepository,
)
from stridefund.repositories.cause_buyer_repository import SqlCauseBuyerRepository  # noqa: F401
from stridefund.repositories.post_repository import (  # noqa: F401
    SqlPostRepository, SqlCommentRepository,
)
from stridefund.repositories.campaign_repository import (  # noqa: F401
    SqlCampaignRepository, SqlCampaignRunnerRepository,
)
