"""Module-level configuration for datestep defaults."""

import threading
from dataclasses import dataclass

from datestep.ops import InvalidDateHandling


@dataclass
class DatestepConfig:
    """Configuration for datestep defaults."""

    # Used by months() when no handling is passed
    default_invalid_date_handling: InvalidDateHandling = InvalidDateHandling.REJECT


# Module-level singleton
_datestep_config: DatestepConfig | None = None
_config_lock = threading.Lock()


def get_datestep_config() -> DatestepConfig:
    """Get the global datestep configuration singleton."""
    global _datestep_config
    if _datestep_config is None:
        with _config_lock:
            if _datestep_config is None:
                _datestep_config = DatestepConfig()
    return _datestep_config


def configure_datestep(
    default_invalid_date_handling: InvalidDateHandling | str | None = None,
) -> None:
    """Configure default datestep settings.

    Args:
        default_invalid_date_handling: Policy used by ``months(n)`` when no
            handling is given. Accepts the enum or its value ("reject",
            "previous", "next"). Pass None to leave it unchanged.

    Example:
        from datestep import configure_datestep, months

        configure_datestep(default_invalid_date_handling="previous")
        quarterly = months(3)  # clamps Jan 31 -> Apr 30
    """
    config = get_datestep_config()
    with _config_lock:
        if default_invalid_date_handling is not None:
            config.default_invalid_date_handling = InvalidDateHandling(
                default_invalid_date_handling
            )


def reset_datestep_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _datestep_config
    with _config_lock:
        _datestep_config = DatestepConfig()
