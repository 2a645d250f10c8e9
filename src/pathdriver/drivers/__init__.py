"""Path syntax drivers.

- PosixDriver: forward slashes, ``/`` root
- WindowsDriver: backslashes, drive letters and UNC roots
"""

from typing import Dict, Optional, Type

from ..errors import ConfigurationError
from ..logging import get_logger
from .base import PathDriver, normalize_array, trim_array
from .posix import PosixDriver
from .windows import WindowsDriver

logger = get_logger(__name__)

DRIVERS: Dict[str, Type[PathDriver]] = {
    "posix": PosixDriver,
    "windows": WindowsDriver,
}


def create_driver(
    name: str,
    cwd: str = "",
    env: Optional[Dict[str, str]] = None,
) -> PathDriver:
    """Create a driver by registry name.

    Args:
        name: Driver name ("posix" or "windows")
        cwd: Initial working directory
        env: Initial environment mapping

    Returns:
        New driver instance with its own state

    Raises:
        ConfigurationError: If the name is not registered
    """
    driver_class = DRIVERS.get(name)
    if driver_class is None:
        raise ConfigurationError(
            f"Unknown path driver: {name}",
            driver=name,
            available=sorted(DRIVERS),
        )

    logger.debug(
        "Creating path driver",
        extra={"extra_fields": {"driver": name, "cwd": cwd}},
    )
    return driver_class(cwd=cwd, env=env)


__all__ = [
    "DRIVERS",
    "PathDriver",
    "PosixDriver",
    "WindowsDriver",
    "create_driver",
    "normalize_array",
    "trim_array",
]
