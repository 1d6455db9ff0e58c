"""Query dispatch for ClasspathTreeLib.

The ClasspathNavigator is the bridge between a client query and the
project model. It routes a children query to the resolver for the
requested node kind and imposes a stable (kind, name) order on the
result, which a tree UI relies on for rendering. Content queries go
either to a class file's attached source or to the archive content
reader.
"""

import logging
from typing import Dict, List, Optional, Union

from .archive.reader import read_content
from .archive.walker import find_file
from .config import NavigatorConfig
from .core.errors import ClasspathError, ModelError, UnknownNodeKindError
from .core.model import ProjectModel
from .core.monitor import NullProgressMonitor, ProgressMonitor
from .core.node import ClasspathNode, ClasspathNodeKind, ClasspathQuery
from .resolvers import (
    ClassFileResolver,
    ContainerResolver,
    FileResolver,
    FolderResolver,
    JarResolver,
    LevelResolver,
    PackageResolver,
)
from .roots import require_root

logger = logging.getLogger(__name__)

RESOLVER_TYPES = (
    ContainerResolver,
    JarResolver,
    PackageResolver,
    ClassFileResolver,
    FolderResolver,
    FileResolver,
)


def parse_kind(kind: Union[ClasspathNodeKind, str, int]) -> ClasspathNodeKind:
    """Parse a node kind from enum, wire name or rank.

    Raises:
        UnknownNodeKindError: If kind names no known node kind
    """
    try:
        return ClasspathNodeKind.parse(kind)
    except ValueError:
        raise UnknownNodeKindError(kind) from None


def sort_nodes(nodes: List[ClasspathNode]) -> List[ClasspathNode]:
    """Sort nodes in place by kind rank, then name.

    Args:
        nodes: Nodes to sort

    Returns:
        The same list, sorted
    """
    nodes.sort(key=lambda node: node.sort_key)
    return nodes


class ClasspathNavigator:
    """Answers children and content queries against a project model.

    Example:
        >>> navigator = ClasspathNavigator(workspace)
        >>> query = ClasspathQuery(project_uri="file:///work/app")
        >>> for node in navigator.get_children(ClasspathNodeKind.CONTAINER, query):
        ...     print(node.name)
    """

    def __init__(self, model: ProjectModel, config: Optional[NavigatorConfig] = None):
        """Create a navigator.

        Args:
            model: Read-only project model
            config: Navigation settings

        Raises:
            ValueError: If config is invalid
        """
        self.model = model
        self.config = config or NavigatorConfig()

        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid navigator configuration: {'; '.join(errors)}")

        self._resolvers: Dict[ClasspathNodeKind, LevelResolver] = {
            resolver_type.kind: resolver_type(model, self.config)
            for resolver_type in RESOLVER_TYPES
        }

    def resolver_for(self, kind: ClasspathNodeKind) -> LevelResolver:
        """Look up the resolver for a node kind.

        Raises:
            UnknownNodeKindError: If no resolver handles kind
        """
        resolver = self._resolvers.get(kind)
        if resolver is None:
            raise UnknownNodeKindError(kind)
        return resolver

    def get_children(self,
                     kind: Optional[Union[ClasspathNodeKind, str, int]],
                     query: Optional[ClasspathQuery],
                     monitor: Optional[ProgressMonitor] = None) -> List[ClasspathNode]:
        """Get the sorted children of the node described by kind and query.

        Args:
            kind: Kind of the children to list, as enum, wire name or rank
            query: Query descriptor
            monitor: Optional cancellation monitor

        Returns:
            Children sorted by (kind rank, name); empty if kind or query
            is missing or nothing is there

        Raises:
            UnknownNodeKindError: If kind has no resolver
            RootNotFoundError: If query.root_path resolves to no root
            OperationCanceledError: If the monitor was canceled
        """
        if kind is None or query is None:
            return []

        monitor = monitor or NullProgressMonitor()
        try:
            resolver = self.resolver_for(parse_kind(kind))
            return sort_nodes(resolver.resolve(query, monitor))
        except ClasspathError as e:
            self._log_error(e)
            raise

    def get_source(self,
                   query: Optional[ClasspathQuery],
                   monitor: Optional[ProgressMonitor] = None) -> str:
        """Get the textual content behind a class file or archive entry.

        Without a root path, query.path is a plain class file locator and
        its attached source is returned. With a root path, query.path is
        a file inside that root's archive.

        Args:
            query: Query descriptor
            monitor: Optional cancellation monitor

        Returns:
            The content, or "" if none is available

        Raises:
            RootNotFoundError: If query.root_path resolves to no root
        """
        if query is None or query.path is None:
            return ""

        monitor = monitor or NullProgressMonitor()
        try:
            if query.root_path is None:
                return self._get_class_file_source(query.path)
            return self._get_archive_file_content(query, monitor)
        except ClasspathError as e:
            self._log_error(e)
            raise

    def _get_class_file_source(self, path: str) -> str:
        try:
            class_file = self.model.resolve_class_file(path)
            if class_file is None:
                return ""
            content = class_file.attached_source()
        except ModelError as e:
            logger.warning("Failed to get source from %s: %s", path, e)
            return ""
        if content is None or not content.strip():
            return ""
        return content

    def _get_archive_file_content(self, query: ClasspathQuery, monitor: ProgressMonitor) -> str:
        try:
            project = self.model.find_project_by_uri(query.project_uri) if query.project_uri else None
            if project is None:
                return ""
            root = require_root(project, query)
            if root is None:
                return ""
            monitor.check_canceled()
            resource = find_file(root.raw_resources(), query.path)
        except ModelError as e:
            logger.warning("Problem getting archive entry content %s: %s", query.path, e)
            return ""

        if resource is None:
            return ""
        return read_content(resource, self.config.content_encoding, self.config.decode_errors)

    def _log_error(self, error: ClasspathError) -> None:
        if self.config.log_errors:
            logger.error("%s: %s", error.__class__.__name__, error.message)

    def __repr__(self) -> str:
        return f"ClasspathNavigator(model={self.model!r})"
