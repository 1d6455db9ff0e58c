"""LevelResolver abstraction for ClasspathTreeLib.

One resolver exists per tree level. Each turns a query into the list of
child nodes at that level by asking the injected project model. They
never raise for "legitimately nothing here": a vanished project or a
stale classpath entry produces an empty list.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..config import NavigatorConfig
from ..core.errors import ModelError
from ..core.model import ArchiveResource, ClassFile, PackageFragment, Project, ProjectModel
from ..core.monitor import ProgressMonitor
from ..core.node import ClasspathNode, ClasspathNodeKind, ClasspathQuery

logger = logging.getLogger(__name__)


class LevelResolver(ABC):
    """Abstract resolver for one level of the dependency tree.

    Subclasses implement resolve_in_project(); project lookup and the
    degradation of model read failures are handled here.
    """

    kind: ClasspathNodeKind

    def __init__(self, model: ProjectModel, config: Optional[NavigatorConfig] = None):
        """Initialize resolver.

        Args:
            model: Read-only project model to query
            config: Navigation settings (defaults to NavigatorConfig())
        """
        self.model = model
        self.config = config or NavigatorConfig()

    def resolve(self, query: ClasspathQuery, monitor: ProgressMonitor) -> List[ClasspathNode]:
        """Resolve the children described by query.

        Args:
            query: Query descriptor
            monitor: Cancellation monitor

        Returns:
            Child nodes in backend order (unsorted)

        Raises:
            RootNotFoundError: If query.root_path resolves to no root
            OperationCanceledError: If the monitor was canceled
        """
        try:
            project = self._find_project(query)
            if project is None:
                return []
            return list(self.resolve_in_project(project, query, monitor))
        except ModelError as e:
            logger.warning("Problem loading %s children for %s: %s",
                           self.kind.wire_name, query.path, e)
            return []

    @abstractmethod
    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        """Resolve children once the owning project is known."""
        pass

    def _find_project(self, query: ClasspathQuery) -> Optional[Project]:
        if not query.project_uri:
            return None
        return self.model.find_project_by_uri(query.project_uri)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.wire_name})"


def class_file_node(class_file: ClassFile, include_path: bool = True) -> ClasspathNode:
    """Build a CLASSFILE node carrying the class file's locator."""
    return ClasspathNode(
        name=class_file.name,
        path=class_file.path if include_path else None,
        kind=ClasspathNodeKind.CLASSFILE,
        uri=class_file.uri,
    )


def package_node(package: PackageFragment) -> ClasspathNode:
    """Build a PACKAGE node.

    The dotted package name is the handle a client passes back to list
    the package's class files.
    """
    return ClasspathNode(name=package.name, path=package.name, kind=ClasspathNodeKind.PACKAGE)


def resource_node(resource: ArchiveResource) -> ClasspathNode:
    """Build a FOLDER or FILE node for a raw archive resource."""
    kind = ClasspathNodeKind.FOLDER if resource.is_directory() else ClasspathNodeKind.FILE
    return ClasspathNode(name=resource.name, path=resource.path, kind=kind)


def resource_nodes(resources: Iterable[ArchiveResource]) -> List[ClasspathNode]:
    """Convert raw archive resources to nodes."""
    return [resource_node(resource) for resource in resources]
