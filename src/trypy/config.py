"""Configuration: frozen Config with environment resolution and scoped overrides.

trypy has very little to configure. The knobs here only affect how captured
errors are reported, never which errors are captured:

- ``TRYPY_LOG_CAPTURED``: log every error captured into a ``Failure``.
- ``TRYPY_LOG_LEVEL``: level used for those log records (name or number).
- ``TRYPY_REDACT_VALUES``: keep held values out of synthesized error messages.

Example:
    with config_scope(log_captured=True, log_level="INFO"):
        Result.to(lambda: int("x"))  # logged at INFO
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
import dataclasses
from dataclasses import dataclass
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

import dotenv
from pydantic import BaseModel, ValidationError, field_validator

from trypy.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "TRYPY_"

_REDACTED = "<redacted>"

_AMBIENT: contextvars.ContextVar[Config | None] = contextvars.ContextVar(
    "trypy_config", default=None
)


def _normalize_level(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        level = logging.getLevelNamesMapping().get(text.upper())
        return level if level is not None else value
    return value


@dataclass(frozen=True)
class Config:
    """Immutable configuration for capture reporting.

    Example:
        config = Config(log_captured=True, log_level="WARNING")
        config.log_level  # 30
    """

    log_captured: bool = False
    #: Level names such as ``"INFO"`` are normalized to their numeric value.
    log_level: int = logging.DEBUG
    redact_values: bool = False

    def __post_init__(self) -> None:
        """Normalize the log level and validate configuration."""
        level = _normalize_level(self.log_level)
        if isinstance(level, bool) or not isinstance(level, int) or level < 0:
            raise ConfigurationError(
                f"log_level must be a logging level, got {self.log_level!r}",
                hint="Use a level name like 'DEBUG' or 'INFO', or a non-negative int.",
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        use_dotenv: bool = True,
    ) -> Config:
        """Build a Config from ``TRYPY_*`` environment variables.

        A ``.env`` file is loaded first (existing variables win) unless
        ``use_dotenv`` is false or an explicit ``environ`` is given.
        """
        if environ is None:
            if use_dotenv:
                dotenv.load_dotenv(override=False)
            environ = os.environ

        raw = {
            key[len(ENV_PREFIX) :].lower(): value
            for key, value in environ.items()
            if key.startswith(ENV_PREFIX) and value.strip()
        }
        try:
            settings = _EnvSettings.model_validate(raw)
        except ValidationError as exc:
            fields = ", ".join(
                ENV_PREFIX + str(err["loc"][0]).upper()
                for err in exc.errors()
                if err["loc"]
            )
            raise ConfigurationError(
                f"Invalid trypy environment configuration: {fields or 'unknown field'}",
                hint="Booleans accept true/false/1/0; levels accept names like 'INFO'.",
            ) from exc

        config = cls(**settings.model_dump())
        log.debug("Resolved trypy configuration from environment: %s", config)
        return config

    def redact(self, value: object) -> str:
        """Render ``value`` for an error message, honouring ``redact_values``."""
        return _REDACTED if self.redact_values else repr(value)

    def __str__(self) -> str:
        """Return a compact, developer-friendly representation."""
        return (
            f"Config(log_captured={self.log_captured}, "
            f"log_level={logging.getLevelName(self.log_level)}, "
            f"redact_values={self.redact_values})"
        )


class _EnvSettings(BaseModel):
    """Schema for values read from the environment."""

    log_captured: bool = False
    log_level: int = logging.DEBUG
    redact_values: bool = False

    model_config = {"extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names (``"info"``) as well as numbers."""
        return _normalize_level(v)


@cache
def _env_config() -> Config:
    # Resolved lazily from inside captures, so it must not raise or touch .env.
    try:
        return Config.from_env(use_dotenv=False)
    except ConfigurationError as exc:
        log.warning("Ignoring invalid trypy configuration, using defaults: %s", exc)
        return Config()


def reset_config_cache() -> None:
    """Forget the cached environment configuration."""
    _env_config.cache_clear()


def resolve_config() -> Config:
    """Return the innermost scoped Config, or the one built from the environment.

    Never raises: invalid ``TRYPY_*`` values are logged once and replaced by
    the defaults. ``.env`` files are not read here; install
    ``Config.from_env()`` with ``config_scope`` to honour one.
    """
    scoped = _AMBIENT.get()
    if scoped is not None:
        return scoped
    return _env_config()


@contextmanager
def config_scope(
    config: Config | None = None, **overrides: Any
) -> Generator[Config]:
    """Install a Config for the duration of a block.

    Scopes nest and are local to the current thread or task.

    Args:
        config: Config to install. Defaults to the currently resolved one.
        **overrides: Field values replacing those of ``config``.

    Yields:
        The Config active in this scope.
    """
    base = config if config is not None else resolve_config()
    try:
        cfg = dataclasses.replace(base, **overrides) if overrides else base
    except TypeError as exc:
        known = ", ".join(f.name for f in dataclasses.fields(Config))
        raise ConfigurationError(str(exc), hint=f"Known fields: {known}") from exc

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
