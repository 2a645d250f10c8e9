"""Process-wide access point that forwards to the active path driver."""

from typing import Any, Dict, Optional

from .drivers.base import PathDriver
from .logging import get_logger
from .path_info import PathInfo

logger = get_logger(__name__)


class _PathMeta(type):
    """Class-level accessors for the active driver's attributes."""

    @property
    def separator(cls) -> str:
        return cls.driver.separator

    @property
    def delimiter(cls) -> str:
        return cls.driver.delimiter

    @property
    def cwd(cls) -> str:
        return cls.driver.cwd

    @cwd.setter
    def cwd(cls, value: str) -> None:
        cls.driver.cwd = value

    @property
    def env(cls) -> Dict[str, str]:
        return cls.driver.env

    @env.setter
    def env(cls, value: Dict[str, str]) -> None:
        cls.driver.env = value


class Path(metaclass=_PathMeta):
    """
    Static path API over a swappable driver.

    Assign ``Path.driver`` (or call ``install``) before use. There is no
    default driver; calls made before one is installed fail with
    AttributeError.

    Example:
        Path.install(WindowsDriver(cwd="C:\\\\work"))
        Path.join("a", "b")  # 'a\\\\b'
    """

    driver: Optional[PathDriver] = None

    @classmethod
    def install(cls, driver: PathDriver) -> PathDriver:
        """Make ``driver`` the active driver and return it."""
        logger.debug(
            "Installing path driver",
            extra={"extra_fields": {"driver": type(driver).__name__}},
        )
        cls.driver = driver
        return driver

    @classmethod
    def join(cls, *paths: str) -> str:
        return cls.driver.join(*paths)

    @classmethod
    def normalize(cls, path: str) -> str:
        return cls.driver.normalize(path)

    @classmethod
    def is_absolute(cls, path: str) -> bool:
        return cls.driver.is_absolute(path)

    @classmethod
    def resolve(cls, *paths: str) -> str:
        return cls.driver.resolve(*paths)

    @classmethod
    def relative(cls, from_path: str, to_path: str) -> str:
        return cls.driver.relative(from_path, to_path)

    @classmethod
    def dirname(cls, path: str) -> str:
        return cls.driver.dirname(path)

    @classmethod
    def extname(cls, path: str) -> str:
        return cls.driver.extname(path)

    @classmethod
    def basename(cls, path: str, ext: str = "") -> str:
        return cls.driver.basename(path, ext)

    @classmethod
    def make_long(cls, path: Any) -> Any:
        return cls.driver.make_long(path)

    @classmethod
    def format(cls, info: Any) -> str:
        return cls.driver.format(info)

    @classmethod
    def parse(cls, path: str) -> PathInfo:
        return cls.driver.parse(path)
