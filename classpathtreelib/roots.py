"""Package root resolution.

Maps the root path carried by a query to the concrete PackageRoot of a
project. Module-path entries can expose one physical archive under
several module names, so when a module name is given the path alone is
not enough and both have to match.
"""

from typing import Optional

from .core.errors import RootNotFoundError
from .core.model import PackageRoot, Project
from .core.node import ClasspathQuery
from .core.paths import same_path


def resolve_root(project: Project,
                 root_path: Optional[str],
                 module_name: Optional[str] = None) -> Optional[PackageRoot]:
    """Find the package root for a (module-qualified) canonical path.

    Args:
        project: Project to search
        root_path: Canonical path of the root
        module_name: Module name disambiguating roots that share a path

    Returns:
        The matching root, or None if there is none
    """
    if root_path is None:
        return None

    if module_name is None:
        return project.find_package_root(root_path)

    canonical_path = project.canonicalize(root_path)
    for root in project.all_package_roots():
        if root.path is None or not same_path(root.path, canonical_path):
            continue
        if root.module_name == module_name:
            return root
    return None


def require_root(project: Project, query: ClasspathQuery) -> Optional[PackageRoot]:
    """Resolve the root a query is scoped to.

    Args:
        project: Project owning the root
        query: Query carrying root_path and module_name

    Returns:
        The resolved root, or None if the query names no root path

    Raises:
        RootNotFoundError: If the query's root path resolves to no root
    """
    if query.root_path is None:
        return None
    root = resolve_root(project, query.root_path, query.module_name)
    if root is None:
        raise RootNotFoundError(query.root_path, query.path, query.module_name)
    return root
