#!/usr/bin/env python3
"""
Browse jars the way an IDE's dependency view does.

This example demonstrates:
- Registering jars as a classpath container of a workspace project
- Expanding the tree one level at a time with ClasspathNavigator
- Reading a raw archive entry such as META-INF/MANIFEST.MF

Usage:
    python examples/browse_jar.py lib/a.jar lib/b.jar
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from classpathtreelib import (
    ClasspathNavigator,
    ClasspathNodeKind,
    ClasspathQuery,
    LoggingConfig,
    Workspace,
    ZipPackageRoot,
    configure_logging,
)

CONTAINER = "example.LIBRARIES"

# What each node kind expands into
CHILD_KIND = {
    ClasspathNodeKind.CONTAINER: ClasspathNodeKind.JAR,
    ClasspathNodeKind.JAR: ClasspathNodeKind.PACKAGE,
    ClasspathNodeKind.PACKAGE: ClasspathNodeKind.CLASSFILE,
    ClasspathNodeKind.FOLDER: ClasspathNodeKind.FOLDER,
}


def print_tree(navigator, project_uri, node, root_path, depth, max_depth):
    """Print node and, up to max_depth, its descendants."""
    print(f"{'  ' * depth}{node.name}  [{node.kind.wire_name}]")
    child_kind = CHILD_KIND.get(node.kind)
    if child_kind is None or depth >= max_depth:
        return

    if node.kind is ClasspathNodeKind.JAR:
        root_path = node.path
    query = ClasspathQuery(project_uri, node.path, root_path,
                           node.module_name if node.kind is ClasspathNodeKind.JAR else None)

    for child in navigator.get_children(child_kind, query):
        # Folders and files listed at package level keep their own kind
        print_tree(navigator, project_uri, child, root_path, depth + 1, max_depth)


def main():
    """Print the dependency tree of the jars given on the command line."""
    jars = [Path(arg) for arg in sys.argv[1:]]
    if not jars:
        print(__doc__)
        return 1

    configure_logging(LoggingConfig(level="INFO"))

    workspace = Workspace()
    project = workspace.create_project("example", Path.cwd())
    project.add_container(CONTAINER, "Referenced Libraries", [ZipPackageRoot(jar) for jar in jars])
    project_uri = Path.cwd().absolute().as_uri()

    navigator = ClasspathNavigator(workspace)
    for container in navigator.get_children(ClasspathNodeKind.CONTAINER, ClasspathQuery(project_uri)):
        print_tree(navigator, project_uri, container, None, 0, max_depth=3)

    print("-" * 50)
    for jar in jars:
        root_path = ZipPackageRoot(jar).path
        manifest = navigator.get_source(ClasspathQuery(project_uri, "/META-INF/MANIFEST.MF", root_path))
        print(f"{jar.name} manifest:")
        print(manifest or "  (none)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
