"""Unit tests for the archive tree walker and portable path helpers.

Tests that directory lookups return exactly the immediate children of
the matching directory, that file lookups find leaves at any depth, and
that prefix matching respects path segment boundaries.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from classpathtreelib.archive import find_children, find_file
from classpathtreelib.core.errors import OperationCanceledError
from classpathtreelib.core.monitor import ProgressMonitor
from classpathtreelib.core.paths import canonicalize, is_path_prefix, same_path, to_portable
from classpathtreelib.testing import InMemoryDirectory, InMemoryFile


def build_resources():
    """Raw resources of a typical jar.

    /META-INF/
        MANIFEST.MF
        maven/
            org.example/
                pom.xml
    /a/
        bc/
            x.txt
        bcd/
            y.txt
    /readme.txt
    """
    pom = InMemoryFile("/META-INF/maven/org.example/pom.xml", b"<project/>")
    group = InMemoryDirectory("/META-INF/maven/org.example", [pom])
    maven = InMemoryDirectory("/META-INF/maven", [group])
    manifest = InMemoryFile("/META-INF/MANIFEST.MF", b"Manifest-Version: 1.0\n")
    meta_inf = InMemoryDirectory("/META-INF", [manifest, maven])

    bc = InMemoryDirectory("/a/bc", [InMemoryFile("/a/bc/x.txt", b"x")])
    bcd = InMemoryDirectory("/a/bcd", [InMemoryFile("/a/bcd/y.txt", b"y")])
    a = InMemoryDirectory("/a", [bcd, bc])

    readme = InMemoryFile("/readme.txt", b"hello")
    return [meta_inf, a, readme]


def paths_of(resources):
    return [resource.path for resource in resources]


class TestPortablePaths(unittest.TestCase):
    """Test portable path helpers."""

    def test_to_portable(self):
        """Test separators and trailing slashes are normalized."""
        self.assertEqual(to_portable("C:\\work\\lib\\"), "C:/work/lib")
        self.assertEqual(to_portable("/"), "/")
        self.assertIsNone(to_portable(None))

    def test_canonicalize(self):
        """Test '.' and '..' segments are resolved lexically."""
        self.assertEqual(canonicalize("/work/app/./lib/../lib/a.jar"), "/work/app/lib/a.jar")
        self.assertEqual(canonicalize("//work//app/"), "/work/app")

    def test_is_path_prefix_respects_segments(self):
        """Test a textual prefix on a sibling directory does not match."""
        self.assertTrue(is_path_prefix("/a/bc", "/a/bc/x.txt"))
        self.assertTrue(is_path_prefix("/a/bc", "/a/bc"))
        self.assertFalse(is_path_prefix("/a/bc", "/a/bcd"))
        self.assertFalse(is_path_prefix("/a/bc", "/a/bcd/y.txt"))
        self.assertTrue(is_path_prefix("/", "/anything"))

    def test_same_path(self):
        """Test equality ignores trailing slashes but not case."""
        self.assertTrue(same_path("/META-INF/", "/META-INF"))
        self.assertFalse(same_path("/meta-inf", "/META-INF"))
        self.assertFalse(same_path(None, "/META-INF"))


class TestFindChildren(unittest.TestCase):
    """Test locating directory children."""

    def setUp(self):
        self.resources = build_resources()

    def test_top_level_directory(self):
        """Test a top-level directory returns its immediate children only."""
        children = find_children(self.resources, "/META-INF")
        self.assertEqual(paths_of(children), ["/META-INF/MANIFEST.MF", "/META-INF/maven"])

    def test_nested_directory(self):
        """Test descending to a nested directory."""
        children = find_children(self.resources, "/META-INF/maven/org.example")
        self.assertEqual(paths_of(children), ["/META-INF/maven/org.example/pom.xml"])

    def test_intermediate_directory(self):
        """Test a directory one level down returns no grandchildren."""
        children = find_children(self.resources, "/META-INF/maven")
        self.assertEqual(paths_of(children), ["/META-INF/maven/org.example"])

    def test_sibling_with_shared_prefix(self):
        """Test '/a/bc' resolves to its own directory, not '/a/bcd'."""
        self.assertEqual(paths_of(find_children(self.resources, "/a/bc")), ["/a/bc/x.txt"])
        self.assertEqual(paths_of(find_children(self.resources, "/a/bcd")), ["/a/bcd/y.txt"])

    def test_missing_directory(self):
        """Test an unknown path yields None."""
        self.assertIsNone(find_children(self.resources, "/META-INF/services"))
        self.assertIsNone(find_children(self.resources, "/nowhere"))
        self.assertIsNone(find_children(self.resources, None))

    def test_file_path_has_no_children(self):
        """Test matching a file returns an empty child list."""
        self.assertEqual(find_children(self.resources, "/META-INF/MANIFEST.MF"), [])

    def test_top_level_files_are_not_expanded(self):
        """Test top-level files are skipped by the directory walk."""
        self.assertIsNone(find_children(self.resources, "/readme.txt"))

    def test_canceled_monitor(self):
        """Test a canceled monitor interrupts the walk."""
        monitor = ProgressMonitor()
        monitor.cancel()
        with self.assertRaises(OperationCanceledError):
            find_children(self.resources, "/META-INF", monitor)


class TestFindFile(unittest.TestCase):
    """Test locating file leaves."""

    def setUp(self):
        self.resources = build_resources()

    def test_top_level_file(self):
        """Test a top-level file matches directly."""
        self.assertEqual(find_file(self.resources, "/readme.txt").path, "/readme.txt")

    def test_deep_file(self):
        """Test a file several directories down."""
        found = find_file(self.resources, "/META-INF/maven/org.example/pom.xml")
        self.assertEqual(found.path, "/META-INF/maven/org.example/pom.xml")

    def test_sibling_with_shared_prefix(self):
        """Test the file is found under the right sibling directory."""
        self.assertEqual(find_file(self.resources, "/a/bcd/y.txt").path, "/a/bcd/y.txt")
        self.assertIsNone(find_file(self.resources, "/a/bc/y.txt"))

    def test_directory_is_not_a_file(self):
        """Test directory paths do not match as files."""
        self.assertIsNone(find_file(self.resources, "/META-INF/maven"))

    def test_missing_file(self):
        """Test an unknown path yields None."""
        self.assertIsNone(find_file(self.resources, "/META-INF/LICENSE"))
        self.assertIsNone(find_file([], "/readme.txt"))


if __name__ == '__main__':
    unittest.main()
