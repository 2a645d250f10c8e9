"""Driver interface and the segment algorithms shared by every path syntax."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..errors import InvalidArgumentError, type_name
from ..path_info import PathInfo


def normalize_array(parts: Sequence[str], allow_above_root: bool) -> List[str]:
    """
    Resolve ``.`` and ``..`` elements in a list of path segments.

    Segments must not contain separators or device names, so the list carries
    no notion of absolute or relative. Callers layer that on top through
    ``allow_above_root`` and their own prefix handling.

    Args:
        parts: Path segments, usually the result of splitting on separators
        allow_above_root: Keep ``..`` segments that cannot cancel an ancestor

    Returns:
        Resolved segments

    Examples:
        >>> normalize_array(["a", ".", "b", ".."], False)
        ['a']
        >>> normalize_array(["..", "a"], True)
        ['..', 'a']
    """
    res: List[str] = []
    for part in parts:
        if not part or part == ".":
            continue

        if part == "..":
            if res and res[-1] != "..":
                res.pop()
            elif allow_above_root:
                res.append("..")
        else:
            res.append(part)
    return res


def trim_array(parts: List[str]) -> List[str]:
    """
    Remove empty elements from both ends of a segment list.

    Returns the original list when nothing needs trimming.
    """
    last_index = len(parts) - 1
    start = 0
    while start <= last_index and not parts[start]:
        start += 1

    end = last_index
    while end >= 0 and not parts[end]:
        end -= 1

    if start == 0 and end == last_index:
        return parts
    if start > end:
        return []
    return parts[start:end + 1]


def require_strings(paths: Sequence[Any], operation: str) -> None:
    """Raise InvalidArgumentError unless every path is a string."""
    for index, path in enumerate(paths):
        if not isinstance(path, str):
            raise InvalidArgumentError(
                f"Arguments to path.{operation} must be strings",
                parameter=f"paths[{index}]",
                actual_type=type_name(path),
            )


class PathDriver(ABC):
    """
    Capability contract for one path syntax.

    Each instance owns its working directory and environment so that several
    drivers can coexist with independent state. Operations are pure functions
    of their arguments plus ``cwd`` and ``env`` as read at call time.
    """

    separator: str = ""
    delimiter: str = ""

    def __init__(self, cwd: str = "", env: Optional[Dict[str, str]] = None) -> None:
        self.cwd = cwd
        self.env: Dict[str, str] = dict(env) if env else {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cwd={self.cwd!r})"

    @abstractmethod
    def join(self, *paths: str) -> str:
        """Join non-empty segments with the separator and normalize."""

    @abstractmethod
    def normalize(self, path: str) -> str:
        """Collapse separators and resolve ``.``/``..`` segments."""

    @abstractmethod
    def is_absolute(self, path: str) -> bool:
        """Return True if the path starts at a root."""

    @abstractmethod
    def resolve(self, *paths: str) -> str:
        """Resolve a sequence of segments into an absolute path."""

    @abstractmethod
    def relative(self, from_path: str, to_path: str) -> str:
        """Return the relative path leading from ``from_path`` to ``to_path``."""

    @abstractmethod
    def dirname(self, path: str) -> str:
        """Return the directory portion of a path."""

    @abstractmethod
    def basename(self, path: str, ext: str = "") -> str:
        """Return the last segment, optionally stripping ``ext``."""

    @abstractmethod
    def extname(self, path: str) -> str:
        """Return the extension of the last segment, including the dot."""

    @abstractmethod
    def make_long(self, path: Any) -> Any:
        """Return the long-path form of a path where the syntax has one."""

    @abstractmethod
    def format(self, info: Any) -> str:
        """Build a path string from a PathInfo or mapping."""

    @abstractmethod
    def _split_path(self, path: str) -> Tuple[str, str, str, str]:
        """Split a path into (root, dir body, base, ext)."""

    def parse(self, path: str) -> PathInfo:
        """
        Decompose a path string into a PathInfo.

        Raises:
            InvalidArgumentError: If path is not a string or cannot be split
        """
        if not isinstance(path, str):
            raise InvalidArgumentError(
                f'Parameter "pathString" must be a string, not {type_name(path)}',
                parameter="pathString",
                actual_type=type_name(path),
            )
        parts = self._split_path(path)
        if len(parts) != 4:
            raise InvalidArgumentError(f'Invalid path "{path}"', parameter="pathString")

        root, dir_body, base, ext = (part or "" for part in parts)
        return PathInfo(
            root=root,
            dir=root + dir_body[:-1],
            base=base,
            ext=ext,
            name=base[:len(base) - len(ext)],
        )

    def _path_object_parts(self, info: Any) -> Tuple[str, str]:
        """Validate a format() argument and return its (dir, base)."""
        if isinstance(info, PathInfo):
            fields = info.to_dict()
        elif isinstance(info, Mapping):
            fields = info
        else:
            raise InvalidArgumentError(
                f'Parameter "pathObject" must be an object, not {type_name(info)}',
                parameter="pathObject",
                actual_type=type_name(info),
            )

        root = fields.get("root") or ""
        if not isinstance(root, str):
            raise InvalidArgumentError(
                f'"pathObject.root" must be a string or None, not {type_name(fields.get("root"))}',
                parameter="pathObject.root",
                actual_type=type_name(fields.get("root")),
            )

        return fields.get("dir") or "", fields.get("base") or ""
