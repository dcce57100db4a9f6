"""Reference entity with awaitable persistence lifecycle hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpdateOptions:
    """Options the persistence layer passes to before-update hooks."""

    patch: bool = False


class LifecycleModel:
    """Plain property-bag entity whose lifecycle hooks do nothing by default.

    Persistence layers await ``before_insert`` before the first save and
    ``before_update`` before every later save. Subclasses override the hooks
    and chain to ``super()``.
    """

    def __init__(self, **fields: Any) -> None:
        for name, value in fields.items():
            setattr(self, name, value)

    async def before_insert(self, context: object | None = None) -> None:
        """Run before the entity is first persisted."""

    async def before_update(
        self,
        options: UpdateOptions,
        context: object | None = None,
    ) -> None:
        """Run before the entity is persisted as an update."""
