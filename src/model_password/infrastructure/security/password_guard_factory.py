"""Wiring helpers building bcrypt-backed password guards for model classes."""

from __future__ import annotations

from collections.abc import Callable

from model_password.application.ports.password_hasher_port import PasswordHasherPort
from model_password.application.services.password_guard import (
    ModelT,
    PasswordFieldAccessor,
    PasswordFieldGuard,
    PasswordGuardOptions,
    guard_model,
)
from model_password.config.settings import PasswordSettings, load_settings
from model_password.infrastructure.security.password_hasher import BcryptPasswordHasher


def build_password_guard(
    options: PasswordGuardOptions | None = None,
    *,
    hasher: PasswordHasherPort | None = None,
    accessor: PasswordFieldAccessor | None = None,
) -> PasswordFieldGuard:
    """Build one guard, defaulting to bcrypt and the configured attribute."""

    return PasswordFieldGuard(
        options=options or PasswordGuardOptions(),
        hasher=hasher or BcryptPasswordHasher(),
        accessor=accessor,
    )


def password_guard(
    options: PasswordGuardOptions | None = None,
    *,
    hasher: PasswordHasherPort | None = None,
    accessor: PasswordFieldAccessor | None = None,
) -> Callable[[ModelT], ModelT]:
    """Return a class decorator hashing the password field of a model class."""

    return guard_model(build_password_guard(options, hasher=hasher, accessor=accessor))


def password_guard_from_settings(
    settings: PasswordSettings | None = None,
    *,
    hasher: PasswordHasherPort | None = None,
) -> Callable[[ModelT], ModelT]:
    """Return a class decorator configured from environment settings."""

    resolved = settings or load_settings()
    return password_guard(resolved.to_guard_options(), hasher=hasher)
