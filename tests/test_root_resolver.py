"""Unit tests for package root resolution.

Covers direct lookup by path, module-name disambiguation over all roots
and the StaleRoot error raised for queries naming a vanished root.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from classpathtreelib import ClasspathQuery, RootNotFoundError, resolve_root
from classpathtreelib.roots import require_root
from classpathtreelib.testing import InMemoryPackageRoot, InMemoryProject, library_entry

JAR = "/work/app/lib/app.jar"
JRT = "/jdk/lib/jrt-fs.jar"


class TestResolveRoot(unittest.TestCase):
    """Test resolve_root."""

    def setUp(self):
        self.app_root = InMemoryPackageRoot(JAR)
        self.java_base = InMemoryPackageRoot(JRT, module_name="java.base")
        self.java_sql = InMemoryPackageRoot(JRT, module_name="java.sql")
        self.transitive = InMemoryPackageRoot("/work/util/lib/util.jar", module_name="util")
        self.project = InMemoryProject(
            "app",
            entries=[library_entry(JAR), library_entry(JRT)],
            roots={JAR: [self.app_root], JRT: [self.java_base, self.java_sql]},
            transitive_roots=[self.transitive],
        )

    def test_direct_lookup_without_module(self):
        """Test a plain path resolves through the direct lookup."""
        self.assertIs(resolve_root(self.project, JAR), self.app_root)

    def test_missing_root(self):
        """Test an unknown path is NotFound, not an error."""
        self.assertIsNone(resolve_root(self.project, "/work/app/lib/missing.jar"))
        self.assertIsNone(resolve_root(self.project, None))

    def test_module_disambiguation(self):
        """Test roots sharing a path resolve to their own module only."""
        self.assertIs(resolve_root(self.project, JRT, "java.base"), self.java_base)
        self.assertIs(resolve_root(self.project, JRT, "java.sql"), self.java_sql)
        self.assertIsNone(resolve_root(self.project, JRT, "java.desktop"))

    def test_module_lookup_canonicalizes_path(self):
        """Test the root path is canonicalized before the scan."""
        self.assertIs(resolve_root(self.project, "/jdk/lib/../lib/jrt-fs.jar", "java.sql"), self.java_sql)

    def test_module_lookup_sees_transitive_roots(self):
        """Test the module scan covers roots outside the direct entries."""
        self.assertIsNone(resolve_root(self.project, "/work/util/lib/util.jar"))
        self.assertIs(resolve_root(self.project, "/work/util/lib/util.jar", "util"), self.transitive)

    def test_idempotent(self):
        """Test resolving twice yields the same root identity."""
        first = resolve_root(self.project, JRT, "java.base")
        second = resolve_root(self.project, JRT, "java.base")
        self.assertIs(first, second)

    def test_first_match_wins(self):
        """Test duplicate module roots resolve to the first one listed."""
        duplicate = InMemoryPackageRoot(JRT, module_name="java.base")
        self.project.transitive_roots.append(duplicate)
        self.assertIs(resolve_root(self.project, JRT, "java.base"), self.java_base)


class TestRequireRoot(unittest.TestCase):
    """Test require_root."""

    def test_stale_root_raises(self):
        """Test a query naming no root raises RootNotFoundError."""
        project = InMemoryProject("app")
        query = ClasspathQuery("app", path="com.example", root_path=JAR)
        with self.assertRaises(RootNotFoundError) as ctx:
            require_root(project, query)
        self.assertEqual(ctx.exception.root_path, JAR)
        self.assertIn("com.example", ctx.exception.message)
        self.assertEqual(ctx.exception.to_dict()['data']['rootPath'], JAR)

    def test_no_root_path(self):
        """Test a query without a root path resolves to no root and does not raise."""
        project = InMemoryProject("app", roots={JAR: [InMemoryPackageRoot(JAR)]})
        query = ClasspathQuery("app", path="com.example")
        self.assertIsNone(require_root(project, query))


if __name__ == '__main__':
    unittest.main()
