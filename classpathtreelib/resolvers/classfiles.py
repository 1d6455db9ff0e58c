"""Leaf level resolvers: class files, archive folders and files."""

from typing import Iterable

from ..archive.walker import find_children
from ..core.model import Project
from ..core.monitor import ProgressMonitor
from ..core.node import ClasspathNode, ClasspathNodeKind, ClasspathQuery
from ..roots import require_root
from .base import LevelResolver, class_file_node, resource_nodes


class ClassFileResolver(LevelResolver):
    """Lists the top-level class files of one package.

    Nested and inner types (Foo$Inner.class) are hidden; they are opened
    through their enclosing type.
    """

    kind = ClasspathNodeKind.CLASSFILE

    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        root = require_root(project, query)
        if root is None:
            return []
        package = root.get_package(query.path)
        if package is None:
            return []

        return [
            class_file_node(class_file)
            for class_file in package.class_files()
            if not self.config.is_nested_type(class_file.name)
        ]


class FolderResolver(LevelResolver):
    """Lists the children of a directory inside an archive.

    The root's raw resources are searched with the archive tree walker.
    This can touch many entries, so the monitor is polled for
    cancellation.
    """

    kind = ClasspathNodeKind.FOLDER

    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        root = require_root(project, query)
        if root is None:
            return []
        children = find_children(root.raw_resources(), query.path, monitor)
        if children is None:
            return []
        return resource_nodes(children)


class FileResolver(LevelResolver):
    """Archive files are leaves.

    The root is still resolved so a stale root is reported like at
    every other level.
    """

    kind = ClasspathNodeKind.FILE

    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        require_root(project, query)
        return []
