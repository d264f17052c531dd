"""Configuration system for secure-random.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SECURE_RANDOM_*) -> .env file -> field defaults.

Configuration is read once when a :class:`~secure_random.source.RandomSource`
is built. Nothing here can change the selected source afterwards.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from secure_random.entropy.base import SourceKind
from secure_random.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class SecureRandomConfig(BaseSettings):
    """Configuration for secure-random.

    Resolution order: init kwargs -> env vars (SECURE_RANDOM_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECURE_RANDOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Source selection ---

    source_order: str = Field(
        default="os_device,crypto_library",
        description="Comma-separated entropy sources, highest priority first",
    )
    device_path: str = Field(
        default="",
        description="Random device file to read (empty = os.urandom())",
    )

    # --- Formatting ---

    default_byte_count: int = Field(
        default=16,
        description="Byte count used when an operation is called without n",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Selection logging verbosity: 'none', 'summary', 'full'",
    )


def parse_source_order(source_order: str) -> tuple[SourceKind, ...]:
    """Parse a comma-separated source list into source kinds.

    Args:
        source_order: Names such as ``"os_device,crypto_library"``.

    Returns:
        The kinds in priority order, duplicates removed.

    Raises:
        ConfigValidationError: If a name is unknown or the list is empty.
    """
    kinds: list[SourceKind] = []
    for raw in source_order.split(","):
        name = raw.strip()
        if not name:
            continue
        try:
            kind = SourceKind(name)
        except ValueError:
            valid = ", ".join(k.value for k in SourceKind)
            raise ConfigValidationError(
                f"Unknown entropy source: '{name}'. Available: {valid}"
            ) from None
        if kind not in kinds:
            kinds.append(kind)
    if not kinds:
        raise ConfigValidationError("source_order must name at least one entropy source")
    return tuple(kinds)


def validate_config(config: SecureRandomConfig) -> tuple[SourceKind, ...]:
    """Check a configuration and return its parsed source order.

    Args:
        config: The configuration to check.

    Returns:
        Candidate source kinds in priority order.

    Raises:
        ConfigValidationError: If any field holds an unusable value.
    """
    if config.log_level not in _LOG_LEVELS:
        raise ConfigValidationError(
            f"Invalid log_level: '{config.log_level}' "
            f"(expected one of {', '.join(sorted(_LOG_LEVELS))})"
        )
    if config.default_byte_count < 0:
        raise ConfigValidationError(
            f"default_byte_count must be non-negative, got {config.default_byte_count}"
        )
    return parse_source_order(config.source_order)
