"""Port for entities exposing awaitable persistence lifecycle hooks."""

from __future__ import annotations

from typing import Protocol

from model_password.domain.lifecycle_model import UpdateOptions


class LifecycleModelPort(Protocol):
    """Entity lifecycle-hook contract consumed by the password guard."""

    async def before_insert(self, context: object | None = None) -> None:
        """Run before first persistence of one entity."""

    async def before_update(
        self,
        options: UpdateOptions,
        context: object | None = None,
    ) -> None:
        """Run before one entity is persisted as a partial or full update."""
