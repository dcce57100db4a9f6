"""Password field guard hashing plaintext passwords in entity lifecycle hooks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from model_password.application.ports.lifecycle_model_port import LifecycleModelPort
from model_password.application.ports.password_hasher_port import PasswordHasherPort
from model_password.domain.lifecycle_model import UpdateOptions

logger = logging.getLogger(__name__)

MIN_ROUNDS = 4
MAX_ROUNDS = 31

ModelT = TypeVar("ModelT", bound=type[LifecycleModelPort])


class PasswordGuardError(ValueError):
    """Base error for rejected password writes and verifications."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class DoubleHashError(PasswordGuardError):
    """Raised when a write would hash a value that is already a password hash."""

    def __init__(self, *, field: str) -> None:
        super().__init__(
            f"refusing to hash an existing password hash in field {field!r}",
            field=field,
        )


class EmptyPasswordError(PasswordGuardError):
    """Raised when a write finds no password and empty passwords are not allowed."""

    def __init__(self, *, field: str) -> None:
        super().__init__(f"password field {field!r} must not be empty", field=field)


class MissingHashError(PasswordGuardError):
    """Raised when verification finds no stored hash to compare against."""

    def __init__(self, *, field: str) -> None:
        super().__init__(f"cannot get password hash from field {field!r}", field=field)


@dataclass(frozen=True)
class PasswordGuardOptions:
    """Immutable guard configuration."""

    allow_empty_password: bool = False
    password_field: str = "password"
    rounds: int = 10

    def __post_init__(self) -> None:
        if not self.password_field.strip():
            raise ValueError("password_field cannot be blank")
        if not MIN_ROUNDS <= self.rounds <= MAX_ROUNDS:
            raise ValueError(f"rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")


@dataclass(frozen=True)
class PasswordFieldAccessor:
    """Getter/setter pair reading and writing the password field of one entity."""

    getter: Callable[[Any], str | None]
    setter: Callable[[Any, str], None]
    has: Callable[[Any], bool] | None = None

    def is_present(self, entity: Any) -> bool:
        """Return whether the entity carries the password field at all."""

        if self.has is None:
            return self.getter(entity) is not None
        return self.has(entity)

    @classmethod
    def for_attribute(cls, name: str) -> PasswordFieldAccessor:
        """Build an accessor for one named instance attribute."""

        def get(entity: Any) -> str | None:
            return getattr(entity, name, None)

        def set_(entity: Any, value: str) -> None:
            setattr(entity, name, value)

        def has(entity: Any) -> bool:
            return hasattr(entity, name)

        return cls(getter=get, setter=set_, has=has)


class PasswordFieldGuard:
    """Hash plaintext passwords before writes and verify candidates on read."""

    def __init__(
        self,
        *,
        options: PasswordGuardOptions,
        hasher: PasswordHasherPort,
        accessor: PasswordFieldAccessor | None = None,
    ) -> None:
        self._options = options
        self._hasher = hasher
        self._accessor = accessor or PasswordFieldAccessor.for_attribute(options.password_field)

    @property
    def options(self) -> PasswordGuardOptions:
        return self._options

    async def before_insert(self, entity: Any) -> None:
        """Hash the password of one entity about to be inserted."""

        await self.hash_on_write(entity)

    async def before_update(self, entity: Any, *, patch: bool) -> None:
        """Hash the password of one entity about to be updated.

        Partial updates that do not carry the password field are left alone;
        an explicit ``None`` still goes through the empty-password check.
        """

        if patch and not self._accessor.is_present(entity):
            logger.debug(
                "password_hash_skipped_patch field=%s",
                self._options.password_field,
            )
            return
        await self.hash_on_write(entity)

    async def hash_on_write(self, entity: Any) -> None:
        """Replace a plaintext password with its hash or reject the write."""

        field = self._options.password_field
        password = self._accessor.getter(entity)

        if password:
            if self._hasher.is_password_hash(password):
                raise DoubleHashError(field=field)
            password_hash = await self._hasher.hash_password(
                password,
                rounds=self._options.rounds,
            )
            self._accessor.setter(entity, password_hash)
            logger.debug(
                "password_hash_written field=%s rounds=%s",
                field,
                self._options.rounds,
            )
            return

        if not self._options.allow_empty_password:
            raise EmptyPasswordError(field=field)

    async def verify_password(self, entity: Any, password: str) -> bool:
        """Compare a plaintext candidate with the stored password hash."""

        password_hash = self._accessor.getter(entity)
        if not password_hash:
            raise MissingHashError(field=self._options.password_field)
        return await self._hasher.verify_password(
            password=password,
            password_hash=password_hash,
        )


def guard_model(guard: PasswordFieldGuard) -> Callable[[ModelT], ModelT]:
    """Return a class decorator adding password hashing and verification.

    The derived class awaits the base hooks first, then applies the guard.
    """

    def decorate(model_class: ModelT) -> ModelT:
        base: Any = model_class

        class GuardedModel(base):
            password_guard = guard

            async def before_insert(self, context: object | None = None) -> None:
                await super().before_insert(context)
                await guard.before_insert(self)

            async def before_update(
                self,
                options: UpdateOptions,
                context: object | None = None,
            ) -> None:
                await super().before_update(options, context)
                await guard.before_update(self, patch=options.patch)

            async def verify_password(self, password: str) -> bool:
                """Return whether password matches the stored hash."""

                return await guard.verify_password(self, password)

        GuardedModel.__name__ = model_class.__name__
        GuardedModel.__qualname__ = model_class.__qualname__
        GuardedModel.__module__ = model_class.__module__
        GuardedModel.__doc__ = model_class.__doc__
        return GuardedModel  # type: ignore[return-value]

    return decorate
