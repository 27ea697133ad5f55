"""Account aggregate root.

Accounts belong to a single class instance (cohort) and accumulate points
through uploads, comments and reactions on their content.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import AccountId, AccountRole, AdmissionNumber, ClassInstanceId


class Account(DomainModel):
    """Account aggregate root.

    Business rules:
    - ``points`` is only ever changed by the contribution awarder
    - ``points`` may go below zero when an account's content is disliked
    - the rank is derived from ``points`` on read and never stored
    """

    id: AccountId
    admission_number: AdmissionNumber
    full_name: str = Field(min_length=1, max_length=255)
    class_instance_id: ClassInstanceId
    role: AccountRole = AccountRole.STUDENT
    points: Decimal = Decimal("0")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
