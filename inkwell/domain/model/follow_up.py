"""Follow-up entity.

A follow-up is a side effect (counter delta, notification write or cleanup)
recorded in the same transaction as the primary write that caused it. It is
applied afterwards, at least once; the unique key makes repeated application
harmless.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import FollowUpId, FollowUpKind, FollowUpStatus


class FollowUp(DomainModel):
    """Recorded side effect awaiting (or done with) application."""

    id: FollowUpId
    key: str = Field(min_length=1, max_length=255)
    kind: FollowUpKind
    payload: dict[str, Any] = Field(default_factory=dict)
    status: FollowUpStatus = FollowUpStatus.PENDING
    attempts: int = Field(default=0, ge=0)
    last_error: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    applied_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.status == FollowUpStatus.PENDING
