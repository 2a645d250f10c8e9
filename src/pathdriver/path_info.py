"""Decomposed path representation."""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass
class PathInfo:
    """A path split into its parts.

    ``base`` is always ``name + ext``. ``dir`` already includes ``root``.
    """
    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Return the parts as a plain dictionary."""
        return asdict(self)
