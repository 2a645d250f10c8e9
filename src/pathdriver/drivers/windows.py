# Copyright Joyent, Inc. and other Node contributors.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to permit
# persons to whom the Software is furnished to do so, subject to the
# following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
# OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN
# NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR
# OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE
# USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Windows path syntax: backslashes, drive letters and UNC roots."""

import re
from dataclasses import dataclass
from typing import Any, Tuple

from ..logging import get_logger
from .base import PathDriver, normalize_array, require_strings, trim_array

logger = get_logger(__name__)

# Split a path into [device, slash, tail]. The device is a drive letter or a
# UNC "\\host\share" prefix; both slash styles are accepted.
SPLIT_DEVICE_RE = re.compile(
    r"^([a-zA-Z]:|[\\/]{2}[^\\/]+[\\/]+[^\\/]+)?([\\/])?([\s\S]*?)\Z"
)

# Split the tail of the above into [dir, basename, ext]
SPLIT_TAIL_RE = re.compile(r"^([\s\S]*?)((?:\.{1,2}|[^\\/]+?|)(\.[^./\\]*|))(?:[\\/]*)\Z")

SEPARATORS_RE = re.compile(r"[\\/]+")
LEADING_SEPARATORS_RE = re.compile(r"^[\\/]+")
TRAILING_SEPARATOR_RE = re.compile(r"[\\/]\Z")
EXPLICIT_UNC_RE = re.compile(r"^[\\/]{2}[^\\/]")
LEADING_DOUBLE_SEPARATOR_RE = re.compile(r"^[\\/]{2,}")
LOCAL_DRIVE_RE = re.compile(r"^[a-zA-Z]:\\")
NETWORK_UNC_RE = re.compile(r"^\\\\[^?.]")
BARE_DRIVE_RE = re.compile(r"^[a-zA-Z]:\Z")
BARE_UNC_ROOT_RE = re.compile(r"^[\\/]{2}[^\\/]+[\\/]+[^\\/]+\Z")


@dataclass
class PathStat:
    """Device and tail of a Windows path."""
    device: str
    tail: str
    is_unc: bool
    is_absolute: bool
    has_root_slash: bool


def stat_path(path: str) -> PathStat:
    """Split a path into its device and tail and classify it."""
    device, slash, tail = SPLIT_DEVICE_RE.match(path).groups()
    device = device or ""
    is_unc = bool(device) and device[1] != ":"
    return PathStat(
        device=device,
        tail=tail or "",
        is_unc=is_unc,
        # UNC paths are always absolute
        is_absolute=is_unc or bool(slash),
        has_root_slash=bool(slash),
    )


def normalize_unc_root(device: str) -> str:
    """Rewrite a UNC device as ``\\\\server\\share``."""
    return "\\\\" + SEPARATORS_RE.sub(r"\\", LEADING_SEPARATORS_RE.sub("", device))


class WindowsDriver(PathDriver):
    """Path operations for Windows paths, case-insensitive where Windows is."""

    separator = "\\"
    delimiter = ";"

    def _split_path(self, path: str) -> Tuple[str, str, str, str]:
        device, slash, tail = SPLIT_DEVICE_RE.match(path).groups()
        root = (device or "") + (slash or "")
        dir_body, base, ext = SPLIT_TAIL_RE.match(tail or "").groups()
        return root, dir_body, base, ext

    def _drive_cwd(self, device: str) -> str:
        """Return the working directory recorded for a drive, or its root."""
        path = self.env.get("=" + device)
        if not path or path[:3].lower() != device.lower() + "\\":
            logger.debug(
                "No working directory recorded for drive, using its root",
                extra={"extra_fields": {"device": device}},
            )
            path = device + "\\"
        return path

    def resolve(self, *paths: str) -> str:
        require_strings(paths, "resolve")

        resolved_device = ""
        resolved_tail = ""
        resolved_absolute = False
        is_unc = False

        for i in range(len(paths) - 1, -2, -1):
            if i >= 0:
                path = paths[i]
            elif not resolved_device:
                path = self.cwd
            else:
                # Drive-relative path: consult the drive-specific cwd. The
                # device is a drive letter here since UNC paths are absolute.
                path = self._drive_cwd(resolved_device)

            require_strings((path,), "resolve")
            if not path:
                continue

            stat = stat_path(path)
            is_unc = stat.is_unc

            if (stat.device and resolved_device
                    and stat.device.lower() != resolved_device.lower()):
                # Points to another device
                continue

            if not resolved_device:
                resolved_device = stat.device
            if not resolved_absolute:
                resolved_tail = stat.tail + "\\" + resolved_tail
                resolved_absolute = stat.is_absolute

            if resolved_device and resolved_absolute:
                break

        if is_unc:
            resolved_device = normalize_unc_root(resolved_device)

        resolved_tail = "\\".join(
            normalize_array(SEPARATORS_RE.split(resolved_tail), not resolved_absolute)
        )

        return (resolved_device + ("\\" if resolved_absolute else "") + resolved_tail) or "."

    def normalize(self, path: str) -> str:
        stat = stat_path(path)
        device = stat.device
        trailing_slash = bool(TRAILING_SEPARATOR_RE.search(stat.tail))

        tail = "\\".join(normalize_array(SEPARATORS_RE.split(stat.tail), not stat.is_absolute))

        if not tail and not stat.is_absolute:
            tail = "."
        if tail and trailing_slash:
            tail += "\\"

        root_slash = "\\" if stat.is_absolute else ""
        if stat.is_unc:
            device = normalize_unc_root(device)
            # A bare share keeps a trailing separator only if it was written
            if not tail and not stat.has_root_slash:
                root_slash = ""

        return device + root_slash + tail

    def is_absolute(self, path: str) -> bool:
        return stat_path(path).is_absolute

    def join(self, *paths: str) -> str:
        require_strings(paths, "join")
        paths = [segment for segment in paths if segment]

        joined = "\\".join(paths)

        # A leading double separator would be read as a UNC root by
        # normalize(). Keep it only if the first segment clearly names a
        # server: exactly two separators and a non-separator, as in
        # join("//server", "share").
        if not paths or not EXPLICIT_UNC_RE.match(paths[0]):
            joined = LEADING_DOUBLE_SEPARATOR_RE.sub(r"\\", joined)

        return self.normalize(joined)

    def relative(self, from_path: str, to_path: str) -> str:
        """
        Return the relative path from ``from_path`` to ``to_path``.

        Segments are compared case-insensitively while the result keeps the
        case of ``to_path``. Paths on different devices share no segment, in
        which case the resolved ``to_path`` is returned as is.

        Example:
            relative("C:\\orandea\\test\\aaa", "C:\\orandea\\impl\\bbb")
            returns "..\\..\\impl\\bbb"
        """
        from_path = self.resolve(from_path)
        to_path = self.resolve(to_path)

        to_parts = trim_array(to_path.split("\\"))
        lower_from_parts = trim_array(from_path.lower().split("\\"))
        lower_to_parts = trim_array(to_path.lower().split("\\"))

        length = min(len(lower_from_parts), len(lower_to_parts))
        same_parts_length = length
        for i in range(length):
            if lower_from_parts[i] != lower_to_parts[i]:
                same_parts_length = i
                break

        if same_parts_length == 0:
            logger.debug(
                "Paths share no root, returning target unchanged",
                extra={"extra_fields": {"from": from_path, "to": to_path}},
            )
            return to_path

        output_parts = [".."] * (len(lower_from_parts) - same_parts_length)
        output_parts.extend(to_parts[same_parts_length:])
        return "\\".join(output_parts)

    def make_long(self, path: Any) -> Any:
        """
        Rewrite a path into its ``\\\\?\\`` long form.

        Local drive paths become ``\\\\?\\C:\\...`` and network shares become
        ``\\\\?\\UNC\\server\\share\\...``. Anything else, including non-string
        input, is returned unchanged.
        """
        if not isinstance(path, str):
            return path
        if not path:
            return ""

        resolved_path = self.resolve(path)

        if LOCAL_DRIVE_RE.match(resolved_path):
            return "\\\\?\\" + resolved_path
        if NETWORK_UNC_RE.match(resolved_path):
            return "\\\\?\\UNC\\" + resolved_path[2:]
        return path

    def dirname(self, path: str) -> str:
        root, dir_body, _, _ = self._split_path(path)

        if not root and not dir_body:
            return "."

        return root + dir_body[:-1]

    def basename(self, path: str, ext: str = "") -> str:
        base = self._split_path(path)[2]
        if ext and base[-len(ext):].lower() == ext.lower():
            base = base[:len(base) - len(ext)]
        return base

    def extname(self, path: str) -> str:
        return self._split_path(path)[3]

    def format(self, info: Any) -> str:
        dir_part, base = self._path_object_parts(info)
        if not dir_part:
            return base
        # A bare drive stays drive-relative and a bare share gets no separator
        if dir_part.endswith(self.separator) or BARE_DRIVE_RE.match(dir_part):
            return dir_part + base
        if not base and BARE_UNC_ROOT_RE.match(dir_part):
            return dir_part
        return dir_part + self.separator + base
