"""Counter ledger domain service."""

import logfire

from inkwell.domain.error import ValidationError
from inkwell.domain.repository import BlogRepository, UserRepository
from inkwell.domain.value import (
    COUNTER_OWNERSHIP,
    BlogId,
    CounterField,
    EntityKind,
    EntityRef,
    UserId,
)

from .base import Service


class LedgerService(Service):
    """Applies signed deltas to derived counters on blogs and users.

    Every counter change in the system goes through apply_delta, which
    delegates to an atomic increment in the owning store.
    """

    def __init__(
        self,
        blog_repository: BlogRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize ledger service.

        Args:
            blog_repository: Blog repository
            user_repository: User repository
        """
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def apply_delta(
        self, entity: EntityRef, field: CounterField, delta: int
    ) -> bool:
        """Add a signed delta to a counter.

        Args:
            entity: Blog or user carrying the counter
            field: Counter to move
            delta: Signed amount, typically +1 or -1

        Returns:
            True if the entity existed and was updated

        Raises:
            ValidationError: If the entity kind does not own the counter
        """
        with logfire.span(
            "ledger_service.apply_delta",
            entity=str(entity),
            field=field.value,
            delta=delta,
        ):
            if field not in COUNTER_OWNERSHIP[entity.kind]:
                raise ValidationError(
                    f"{entity.kind.value} has no counter {field.value}"
                )
            if delta == 0:
                return True

            if entity.kind == EntityKind.BLOG:
                updated = await self.blog_repository.apply_delta(
                    BlogId(entity.id), field, delta
                )
            else:
                updated = await self.user_repository.apply_delta(
                    UserId(entity.id), field, delta
                )

            if updated:
                logfire.info(
                    "Counter moved", entity=str(entity), field=field.value, delta=delta
                )
            else:
                logfire.warn(
                    "Counter target missing",
                    entity=str(entity),
                    field=field.value,
                    delta=delta,
                )
            return updated
