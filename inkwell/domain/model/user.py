"""User aggregate root.

Accounts are created by the account service (signup and federated login live
outside this API). Inkwell reads them for author summaries and moves their
counters.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import UserId
from inkwell.domain.value.types import Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    fullname: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    profile_img: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    total_posts: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
