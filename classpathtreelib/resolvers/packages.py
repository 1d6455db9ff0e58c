"""Package level resolver."""

from typing import Iterable, List

from ..core.model import Project
from ..core.monitor import ProgressMonitor
from ..core.node import ClasspathNode, ClasspathNodeKind, ClasspathQuery
from ..roots import require_root
from .base import LevelResolver, class_file_node, package_node, resource_nodes


class PackageResolver(LevelResolver):
    """Lists the content of one package root.

    Non-empty packages become PACKAGE nodes. The unnamed package is not a
    useful display node, so its class files are surfaced directly - one
    level only, nested packages are not unwrapped. The root's raw
    resources (META-INF and friends) follow as FOLDER/FILE nodes.
    """

    kind = ClasspathNodeKind.PACKAGE

    def resolve_in_project(self,
                           project: Project,
                           query: ClasspathQuery,
                           monitor: ProgressMonitor) -> Iterable[ClasspathNode]:
        root = require_root(project, query)
        if root is None:
            return []
        result: List[ClasspathNode] = []

        for package in root.packages():
            if not package.has_children():
                continue
            if package.is_default:
                result.extend(
                    class_file_node(class_file, include_path=False)
                    for class_file in package.class_files()
                )
            else:
                result.append(package_node(package))

        if self.config.include_raw_resources:
            result.extend(resource_nodes(root.raw_resources()))

        return result
