"""Container and jar level resolvers.

The top two levels of the tree come straight from the project's raw
classpath: first the containers, then the package roots each entry
contributes.
"""

import logging
from typing import Iterable

from ..core.errors import ModelError
from ..core.model import EntryKind, Project
from ..core.monitor import ProgressMonitor
from ..core.node import ClasspathNode, ClasspathNodeKind, ClasspathQuery
from ..core.paths import same_path, to_portable
from .base import LevelResolver

logger = logging.getLogger(__name__)


class ContainerResolver(LevelResolver):
    """Lists the classpath containers of a project.

    Source entries are skipped. Entries whose container can no longer be
    resolved are dropped silently, since classpath state may be stale.
    """

    kind = ClasspathNodeKind.CONTAINER

    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        for entry in project.raw_classpath():
            if entry.kind is EntryKind.SOURCE:
                continue
            try:
                container = project.resolve_container(entry.path)
            except ModelError as e:
                logger.debug("Skipping unresolvable container %s: %s", entry.path, e)
                continue
            if container is None:
                continue
            yield ClasspathNode(
                name=container.description,
                path=to_portable(container.path),
                kind=ClasspathNodeKind.CONTAINER,
            )


class JarResolver(LevelResolver):
    """Lists the package roots contributed by one classpath entry.

    Module-path roots carry their module name so later queries can tell
    apart roots that share a path.
    """

    kind = ClasspathNodeKind.JAR

    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        if query.path is None:
            return []

        entry = next(
            (candidate for candidate in project.raw_classpath()
             if same_path(candidate.path, query.path)),
            None,
        )
        if entry is None:
            return []

        children = []
        for root in project.find_package_roots(entry):
            children.append(ClasspathNode(
                name=root.name,
                path=to_portable(root.path),
                kind=ClasspathNodeKind.JAR,
                module_name=root.module_name if root.is_module else None,
            ))
        return children
