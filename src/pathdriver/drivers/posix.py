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

"""POSIX path syntax: forward slashes, a single ``/`` root, no devices."""

import re
from typing import Any, Tuple

from .base import PathDriver, normalize_array, require_strings, trim_array

# Split a filename into [root, dir, basename, ext]. "root" is "/" or nothing.
SPLIT_PATH_RE = re.compile(r"^(/?|)([\s\S]*?)((?:\.{1,2}|[^/]+?|)(\.[^./]*|))(?:/*)\Z")


class PosixDriver(PathDriver):
    """Path operations for slash-separated POSIX paths."""

    separator = "/"
    delimiter = ":"

    def _split_path(self, path: str) -> Tuple[str, str, str, str]:
        return SPLIT_PATH_RE.match(path).groups()

    def resolve(self, *paths: str) -> str:
        require_strings(paths, "resolve")

        resolved_path = ""
        resolved_absolute = False

        # Walk right to left, then fall back to cwd, until a root is found
        for path in (*reversed(paths), self.cwd):
            if resolved_absolute:
                break
            require_strings((path,), "resolve")
            if not path:
                continue
            resolved_path = path + "/" + resolved_path
            resolved_absolute = path[0] == "/"

        resolved_path = "/".join(
            normalize_array(resolved_path.split("/"), not resolved_absolute)
        )
        return ("/" if resolved_absolute else "") + resolved_path or "."

    def normalize(self, path: str) -> str:
        is_abs = self.is_absolute(path)
        trailing_slash = path.endswith("/")

        path = "/".join(normalize_array(path.split("/"), not is_abs))

        if not path and not is_abs:
            path = "."
        if path and trailing_slash:
            path += "/"

        return ("/" if is_abs else "") + path

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/")

    def join(self, *paths: str) -> str:
        require_strings(paths, "join")
        return self.normalize("/".join(segment for segment in paths if segment))

    def relative(self, from_path: str, to_path: str) -> str:
        from_parts = trim_array(self.resolve(from_path)[1:].split("/"))
        to_parts = trim_array(self.resolve(to_path)[1:].split("/"))

        length = min(len(from_parts), len(to_parts))
        same_parts_length = length
        for i in range(length):
            if from_parts[i] != to_parts[i]:
                same_parts_length = i
                break

        output_parts = [".."] * (len(from_parts) - same_parts_length)
        output_parts.extend(to_parts[same_parts_length:])
        return "/".join(output_parts)

    def make_long(self, path: Any) -> Any:
        return path

    def dirname(self, path: str) -> str:
        root, dir_body, _, _ = self._split_path(path)

        if not root and not dir_body:
            return "."

        # Strip the trailing slash
        return root + dir_body[:-1]

    def basename(self, path: str, ext: str = "") -> str:
        base = self._split_path(path)[2]
        if ext and base.endswith(ext):
            base = base[:len(base) - len(ext)]
        return base

    def extname(self, path: str) -> str:
        return self._split_path(path)[3]

    def format(self, info: Any) -> str:
        dir_part, base = self._path_object_parts(info)
        if not dir_part:
            return base
        # A bare root already ends with the separator
        if dir_part == "/":
            return dir_part + base
        return dir_part + self.separator + base
