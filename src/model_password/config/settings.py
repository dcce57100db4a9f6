"""Runtime password-guard settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from model_password.application.services.password_guard import (
    MAX_ROUNDS,
    MIN_ROUNDS,
    PasswordGuardOptions,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]
BcryptRounds = Annotated[int, Field(ge=MIN_ROUNDS, le=MAX_ROUNDS)]


class PasswordSettings(BaseSettings):
    """Environment-driven password guard settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    allow_empty_password: bool = Field(
        default=False,
        validation_alias="PASSWORD_ALLOW_EMPTY",
    )
    password_field: NonEmptyStr = Field(
        default="password",
        validation_alias="PASSWORD_FIELD",
    )
    rounds: BcryptRounds = Field(default=10, validation_alias="PASSWORD_ROUNDS")

    def to_guard_options(self) -> PasswordGuardOptions:
        """Convert settings to immutable guard options."""

        return PasswordGuardOptions(
            allow_empty_password=self.allow_empty_password,
            password_field=self.password_field,
            rounds=self.rounds,
        )


@lru_cache(maxsize=1)
def load_settings() -> PasswordSettings:
    """Load and cache password guard settings."""

    return PasswordSettings()
