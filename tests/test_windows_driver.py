"""Tests for the Windows driver."""

import pytest

from pathdriver import InvalidArgumentError, PathInfo, WindowsDriver
from pathdriver.drivers.windows import normalize_unc_root, stat_path


class TestStatPath:
    """Tests for device detection."""

    def test_drive_absolute(self):
        """Test a drive with a root slash."""
        stat = stat_path("C:\\a")
        assert stat.device == "C:"
        assert stat.tail == "a"
        assert stat.is_unc is False
        assert stat.is_absolute is True

    def test_drive_relative(self):
        """Test a drive without a root slash."""
        stat = stat_path("C:a")
        assert stat.device == "C:"
        assert stat.is_absolute is False

    def test_unc(self):
        """Test a UNC root is always absolute."""
        stat = stat_path("//server/share")
        assert stat.device == "//server/share"
        assert stat.is_unc is True
        assert stat.is_absolute is True

    def test_no_device(self):
        """Test a plain relative path."""
        stat = stat_path("a\\b")
        assert stat.device == ""
        assert stat.tail == "a\\b"
        assert stat.is_absolute is False

    def test_normalize_unc_root(self):
        """Test UNC roots are rewritten with single backslashes."""
        assert normalize_unc_root("//server//share") == "\\\\server\\share"
        assert normalize_unc_root("\\\\\\server/share") == "\\\\server\\share"


class TestWindowsNormalize:
    """Tests for normalize."""

    def test_resolves_parent(self, windows):
        """Test '..' is resolved after a drive root."""
        assert windows.normalize("C:\\a\\..\\b") == "C:\\b"

    def test_converts_forward_slashes(self, windows):
        """Test mixed separators become backslashes and a trailing one is kept."""
        assert windows.normalize("C:/a//b/") == "C:\\a\\b\\"

    def test_drive_relative(self, windows):
        """Test a bare drive normalizes to the drive's current directory."""
        assert windows.normalize("c:") == "c:."

    def test_unc_path(self, windows):
        """Test UNC paths get a canonical root."""
        assert windows.normalize("//server/share/dir/../file") == "\\\\server\\share\\file"

    def test_unc_share_trailing_separator(self, windows):
        """Test a bare share keeps a trailing separator only when written."""
        assert windows.normalize("\\\\server\\share") == "\\\\server\\share"
        assert windows.normalize("\\\\server\\share\\") == "\\\\server\\share\\"

    def test_relative_parents_kept(self, windows):
        """Test '..' above a relative start is kept."""
        assert windows.normalize("a\\..\\..\\b") == "..\\b"

    @pytest.mark.parametrize(
        "path",
        ["C:\\a\\..\\b\\", "//server/share", "\\\\server\\share\\x\\", "a/b/../..", "c:", ""],
    )
    def test_idempotent(self, windows, path):
        """Test normalizing twice equals normalizing once."""
        once = windows.normalize(path)
        assert windows.normalize(once) == once


class TestWindowsJoin:
    """Tests for join."""

    def test_unc_from_server_and_share(self, windows):
        """Test a UNC root can be built from a server and a share."""
        assert windows.join("//server", "share") == "\\\\server\\share"

    def test_accidental_double_separator_collapsed(self, windows):
        """Test a leading run of separators is not read as UNC."""
        assert windows.join("//", "a") == "\\a"
        assert windows.join("\\\\\\a", "b") == "\\a\\b"

    def test_plain_join(self, windows):
        """Test segments are joined with backslashes."""
        assert windows.join("a", "", "b") == "a\\b"
        assert windows.join("C:", "a") == "C:\\a"

    def test_join_nothing_is_dot(self, windows):
        """Test join with no usable segments returns '.'."""
        assert windows.join() == "."

    def test_join_rejects_non_strings(self, windows):
        """Test a non-string segment signals invalid-argument."""
        with pytest.raises(InvalidArgumentError):
            windows.join(None)


class TestWindowsResolve:
    """Tests for resolve."""

    def test_drive_then_relative(self, windows):
        """Test a relative segment appended to a drive path."""
        assert windows.resolve("C:\\a", "b") == "C:\\a\\b"

    def test_root_relative_takes_later_device(self, windows):
        """Test a rooted path picks up the device of an earlier argument."""
        assert windows.resolve("c:/ignore", "d:\\a/b\\c/d", "\\e.exe") == "d:\\e.exe"

    def test_conflicting_device_skipped(self, windows):
        """Test arguments on another drive are ignored."""
        assert windows.resolve("c:/blah\\blah", "d:/games", "c:../a") == "c:\\blah\\a"

    def test_falls_back_to_cwd(self, windows):
        """Test relative input resolves against cwd."""
        assert windows.resolve("foo") == "C:\\Users\\test\\foo"

    def test_drive_cwd_from_env(self):
        """Test a drive-relative path uses the '=<DRIVE>:' entry."""
        driver = WindowsDriver(env={"=D:": "D:\\work"})
        assert driver.resolve("D:x") == "D:\\work\\x"

    def test_drive_cwd_missing_uses_root(self):
        """Test a missing drive cwd falls back to the drive root."""
        assert WindowsDriver().resolve("D:x") == "D:\\x"

    def test_drive_cwd_for_other_drive_ignored(self):
        """Test a drive cwd that points elsewhere is not used."""
        driver = WindowsDriver(env={"=D:": "C:\\other"})
        assert driver.resolve("D:x") == "D:\\x"

    def test_drive_cwd_case_insensitive(self):
        """Test the drive cwd matches regardless of letter case."""
        driver = WindowsDriver(env={"=d:": "D:\\Work"})
        assert driver.resolve("d:x") == "d:\\Work\\x"

    def test_unc_root(self, windows):
        """Test resolution under a UNC share."""
        assert windows.resolve("\\\\server\\share", "..", "relative") == "\\\\server\\share\\relative"

    def test_device_comparison_case_insensitive(self, windows):
        """Test drive letters of different case are the same device."""
        assert windows.resolve("C:\\a", "c:b") == "c:\\a\\b"

    def test_rejects_non_strings(self, windows):
        """Test a non-string argument signals invalid-argument."""
        with pytest.raises(InvalidArgumentError):
            windows.resolve(42)


class TestWindowsRelative:
    """Tests for relative."""

    def test_diverging_paths(self, windows):
        """Test several levels of divergence."""
        result = windows.relative("C:\\orandea\\test\\aaa", "C:\\orandea\\impl\\bbb")
        assert result == "..\\..\\impl\\bbb"

    def test_drive_letter_case_insensitive(self, windows):
        """Test drive letters compare case-insensitively."""
        assert windows.relative("c:\\a", "C:\\a\\b") == "b"

    def test_keeps_target_case(self, windows):
        """Test the result keeps the case of the target."""
        assert windows.relative("C:\\Foo\\Bar", "c:\\foo\\BAZ") == "..\\BAZ"

    def test_same_path(self, windows):
        """Test identical paths give an empty result."""
        assert windows.relative("C:\\a\\b", "c:\\A\\B") == ""

    def test_different_drives_return_target(self, windows):
        """Test paths on different drives return the resolved target."""
        assert windows.relative("C:\\a", "D:\\b") == "D:\\b"


class TestWindowsMakeLong:
    """Tests for make_long."""

    def test_local_drive(self, windows):
        """Test a drive path gets the long prefix."""
        assert windows.make_long("C:\\foo") == "\\\\?\\C:\\foo"

    def test_relative_path_is_resolved_first(self, windows):
        """Test relative input is resolved against cwd."""
        assert windows.make_long("foo") == "\\\\?\\C:\\Users\\test\\foo"

    def test_network_share(self, windows):
        """Test a UNC path gets the UNC long prefix."""
        assert windows.make_long("\\\\server\\share\\x") == "\\\\?\\UNC\\server\\share\\x"

    def test_passthrough(self):
        """Test empty, non-string and unresolvable input."""
        driver = WindowsDriver()
        assert driver.make_long("") == ""
        assert driver.make_long(5) == 5
        assert driver.make_long("foo") == "foo"


class TestWindowsParts:
    """Tests for dirname, basename and extname."""

    def test_dirname(self, windows):
        """Test dirname on drive, UNC and relative paths."""
        assert windows.dirname("C:\\a\\b") == "C:\\a"
        assert windows.dirname("C:\\") == "C:\\"
        assert windows.dirname("\\\\server\\share\\x") == "\\\\server\\share\\"
        assert windows.dirname("foo") == "."

    def test_basename_extension_case_insensitive(self, windows):
        """Test the extension suffix is matched case-insensitively."""
        assert windows.basename("C:\\a\\B.TXT", ".txt") == "B"
        assert windows.basename("C:\\a\\b.txt") == "b.txt"

    def test_basename_of_share_root(self, windows):
        """Test a share root has no basename."""
        assert windows.basename("\\\\server\\share\\") == ""

    def test_extname(self, windows):
        """Test extension detection ignores dots in directories."""
        assert windows.extname("C:\\a\\b.txt") == ".txt"
        assert windows.extname("C:\\a.d\\b") == ""
        assert windows.extname("C:\\a\\.hidden") == ""


class TestWindowsParseFormat:
    """Tests for parse and format."""

    def test_parse(self, windows):
        """Test a drive path decomposes into its parts."""
        assert windows.parse("C:\\path\\dir\\file.txt") == PathInfo(
            root="C:\\",
            dir="C:\\path\\dir",
            base="file.txt",
            ext=".txt",
            name="file",
        )

    def test_parse_unc(self, windows):
        """Test the UNC root is reported as root."""
        info = windows.parse("\\\\server\\share\\file")
        assert info.root == "\\\\server\\share\\"
        assert info.base == "file"

    def test_format(self, windows):
        """Test format joins with a backslash, once."""
        assert windows.format({"dir": "C:\\path\\dir", "base": "file.txt"}) == "C:\\path\\dir\\file.txt"
        assert windows.format({"dir": "C:\\", "base": "f"}) == "C:\\f"
        assert windows.format({"base": "f"}) == "f"

    def test_format_drive_relative(self, windows):
        """Test a bare drive directory stays drive-relative."""
        assert windows.format({"dir": "C:", "base": "x"}) == "C:x"
        assert windows.format(windows.parse("C:a\\b.txt")) == "C:a\\b.txt"

    def test_format_bare_share(self, windows):
        """Test a bare UNC share gets no trailing separator."""
        assert windows.format(windows.parse("\\\\server\\share")) == "\\\\server\\share"
        assert windows.format({"dir": "\\\\server\\share", "base": "x"}) == "\\\\server\\share\\x"

    @pytest.mark.parametrize(
        "path",
        [
            "C:\\a\\b.txt",
            "C:\\b.txt",
            "a\\b",
            "\\\\server\\share\\x.y",
            "C:x",
            "C:a\\b.txt",
            "\\\\server\\share",
        ],
    )
    def test_round_trip(self, windows, path):
        """Test format(parse(p)) gives back an equivalent path."""
        assert windows.normalize(windows.format(windows.parse(path))) == windows.normalize(path)

    def test_format_rejects_non_object(self, windows):
        """Test format signals invalid-argument for non-objects."""
        with pytest.raises(InvalidArgumentError):
            windows.format(None)

    def test_parse_rejects_non_string(self, windows):
        """Test parse signals invalid-argument for non-strings."""
        with pytest.raises(InvalidArgumentError):
            windows.parse(["C:\\"])


class TestWindowsIsAbsolute:
    """Tests for is_absolute."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("C:\\x", True),
            ("C:/x", True),
            ("C:x", False),
            ("\\\\server\\share", True),
            ("\\x", True),
            ("x", False),
            ("", False),
        ],
    )
    def test_is_absolute(self, windows, path, expected):
        """Test absoluteness for drive, UNC and relative paths."""
        assert windows.is_absolute(path) is expected
