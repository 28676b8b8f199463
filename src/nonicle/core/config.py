"""
Configuration schema and loading for nonicle.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction; the process-wide
active settings are swapped as a whole by configure().
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENVVAR_PREFIX = "NONICLE"


class NonicleSettings(BaseModel):
    """Assertion layer configuration.

    debug_assertions mirrors a build mode: enabled in development and test
    runs, disabled in optimized runs (python -O sets __debug__ to False).
    With assertions disabled, checked construction of a Canonical envelope
    trusts its argument. That is the trust boundary: production misuse
    yields a silently non-canonical envelope.
    """

    model_config = {"frozen": True}

    debug_assertions: bool = Field(
        default=__debug__,
        description="Verify canonical form on checked construction and after canonicalization",
    )
    tiebreak_precondition: Literal["debug", "always"] = Field(
        default="debug",
        description="Check that the primary ordering reported EQUAL before a tie-break: "
        "only with debug assertions ('debug') or unconditionally ('always')",
    )
    log_violations: bool = Field(
        default=True,
        description="Log invariant violations before raising",
    )

    @property
    def tiebreak_checked(self) -> bool:
        return self.tiebreak_precondition == "always" or self.debug_assertions


_active: NonicleSettings = NonicleSettings()


def get_settings() -> NonicleSettings:
    """Return the active settings."""
    return _active


def configure(settings: NonicleSettings) -> NonicleSettings:
    """Install new active settings.

    Args:
        settings: Validated settings to activate

    Returns:
        The previously active settings, so callers can restore them.
    """
    global _active
    previous = _active
    _active = settings
    logger.debug(
        "nonicle settings configured",
        extra={
            "debug_assertions": settings.debug_assertions,
            "tiebreak_precondition": settings.tiebreak_precondition,
        },
    )
    return previous


@contextmanager
def override_settings(**changes: Any) -> Iterator[NonicleSettings]:
    """Temporarily replace individual settings fields.

    Example:
        with override_settings(debug_assertions=False):
            Canonical(["b", "a"])  # trusted, not checked
    """
    updated = NonicleSettings(**{**get_settings().model_dump(), **changes})
    previous = configure(updated)
    try:
        yield updated
    finally:
        configure(previous)


def _dynaconf_to_dict(dynaconf_settings: Any) -> dict[str, Any]:
    # Dynaconf returns uppercase keys; Pydantic fields are lowercase.
    # Internal Dynaconf keys are filtered out.
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    return {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}


def load_settings(config_path: Path) -> NonicleSettings:
    """Load settings from a YAML or TOML file with environment overrides.

    Precedence:
    1. Environment variables (NONICLE_*) - highest priority
    2. Config file
    3. Defaults from the Pydantic schema - lowest priority

    Args:
        config_path: Path to configuration file

    Returns:
        Validated NonicleSettings instance (not activated, see configure())

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
    )
    return NonicleSettings(**_dynaconf_to_dict(dynaconf_settings))


def settings_from_env() -> NonicleSettings:
    """Build settings from NONICLE_* environment variables only."""
    from dynaconf import Dynaconf

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        environments=False,
        load_dotenv=False,
    )
    return NonicleSettings(**_dynaconf_to_dict(dynaconf_settings))
