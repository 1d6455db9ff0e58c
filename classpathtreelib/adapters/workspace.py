"""Workspace backend for ClasspathTreeLib.

A small, explicit project model: projects are registered with an on-disk
location and a raw classpath of source folders, libraries, containers and
project references. Applications (and tests) build it up front and hand
it to a ClasspathNavigator, which only ever reads it.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from ..core.model import (
    ClassFile,
    ClasspathContainer,
    ClasspathEntry,
    EntryKind,
    PackageRoot,
    Project,
    ProjectModel,
)
from ..core.paths import canonicalize, is_path_prefix, same_path, to_portable

logger = logging.getLogger(__name__)


def uri_to_path(uri: str) -> str:
    """Convert a file URI (or plain path) to a portable path.

    Args:
        uri: 'file:///work/app' style URI or a filesystem path

    Returns:
        Canonical portable path
    """
    parsed = urlparse(uri)
    if parsed.scheme == 'file':
        local = url2pathname(parsed.path)
        if parsed.netloc and parsed.netloc != 'localhost':
            local = f"//{parsed.netloc}{local}"
        return canonicalize(Path(local).as_posix())
    return canonicalize(to_portable(uri))


class WorkspaceProject(Project):
    """Project with an explicitly registered classpath."""

    def __init__(self, name: str, location: Union[str, Path], workspace: Optional['Workspace'] = None):
        """Initialize a project.

        Args:
            name: Project name
            location: Project directory
            workspace: Owning workspace, used to follow project references
        """
        self._name = name
        self.location = Path(location)
        self.workspace = workspace
        self._entries: List[ClasspathEntry] = []
        self._containers: Dict[str, ClasspathContainer] = {}
        self._roots: Dict[str, List[PackageRoot]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def location_path(self) -> str:
        """Canonical portable form of the project location."""
        return canonicalize(self.location.absolute().as_posix())

    def exists(self) -> bool:
        return self.location.is_dir()

    # Classpath construction

    def add_source_folder(self, path: str) -> ClasspathEntry:
        """Register a source folder entry (never shown as a container)."""
        return self._add_entry(EntryKind.SOURCE, path)

    def add_library(self, root: PackageRoot) -> ClasspathEntry:
        """Register a single library root (jar or class folder)."""
        entry = self._add_entry(EntryKind.LIBRARY, root.path)
        self._roots[entry.path] = [root]
        return entry

    def add_container(self, path: str, description: str,
                      roots: Iterable[PackageRoot] = ()) -> ClasspathEntry:
        """Register a classpath container contributing several roots."""
        entry = self._add_entry(EntryKind.CONTAINER, path)
        self._containers[entry.path] = ClasspathContainer(description=description, path=entry.path)
        self._roots[entry.path] = list(roots)
        return entry

    def add_project_reference(self, project_name: str) -> ClasspathEntry:
        """Register a dependency on another project of the workspace."""
        return self._add_entry(EntryKind.PROJECT, '/' + project_name)

    def remove_entry(self, path: str) -> None:
        """Drop a raw classpath entry and everything it contributed."""
        portable = to_portable(path)
        self._entries = [entry for entry in self._entries if not same_path(entry.path, portable)]
        self._containers.pop(portable, None)
        self._roots.pop(portable, None)

    def _add_entry(self, kind: EntryKind, path: str) -> ClasspathEntry:
        entry = ClasspathEntry(kind=kind, path=to_portable(path))
        self._entries.append(entry)
        return entry

    # Project interface

    def raw_classpath(self) -> Sequence[ClasspathEntry]:
        return list(self._entries)

    def resolve_container(self, entry_path: str) -> Optional[ClasspathContainer]:
        return self._containers.get(to_portable(entry_path))

    def find_package_roots(self, entry: ClasspathEntry) -> Sequence[PackageRoot]:
        if entry.kind is EntryKind.PROJECT:
            referenced = self._referenced_project(entry)
            return referenced.direct_package_roots() if referenced is not None else []
        return list(self._roots.get(entry.path, ()))

    def direct_package_roots(self) -> List[PackageRoot]:
        """Roots contributed by this project's own library and container entries."""
        roots: List[PackageRoot] = []
        for entry in self._entries:
            if entry.kind is not EntryKind.PROJECT:
                roots.extend(self._roots.get(entry.path, ()))
        return roots

    def all_package_roots(self) -> Sequence[PackageRoot]:
        roots = self.direct_package_roots()
        for entry in self._entries:
            if entry.kind is EntryKind.PROJECT:
                roots.extend(self.find_package_roots(entry))
        return roots

    def find_package_root(self, path: str) -> Optional[PackageRoot]:
        canonical_path = canonicalize(path)
        for root in self.all_package_roots():
            if same_path(root.path, canonical_path):
                return root
        return None

    def _referenced_project(self, entry: ClasspathEntry) -> Optional['WorkspaceProject']:
        if self.workspace is None:
            return None
        return self.workspace.get_project(entry.path.lstrip('/'))


class Workspace(ProjectModel):
    """Collection of projects, looked up by location.

    Example:
        >>> workspace = Workspace()
        >>> project = workspace.create_project("app", "/work/app")
        >>> project.add_library(ZipPackageRoot("/work/app/lib/app.jar"))
    """

    def __init__(self):
        self._projects: Dict[str, WorkspaceProject] = {}

    def create_project(self, name: str, location: Union[str, Path]) -> WorkspaceProject:
        """Create and register a project."""
        project = WorkspaceProject(name, location, workspace=self)
        self._projects[name] = project
        return project

    def get_project(self, name: str) -> Optional[WorkspaceProject]:
        return self._projects.get(name)

    def remove_project(self, name: str) -> None:
        self._projects.pop(name, None)

    def projects(self) -> List[Project]:
        return list(self._projects.values())

    def find_project_by_uri(self, uri: str) -> Optional[Project]:
        """Find the existing project whose location contains uri.

        When locations nest, the innermost project wins.
        """
        if not uri:
            return None
        target = uri_to_path(uri)
        candidates = [
            project for project in self._projects.values()
            if is_path_prefix(project.location_path, target)
        ]
        if not candidates:
            return None
        project = max(candidates, key=lambda candidate: len(candidate.location_path))
        if not project.exists():
            logger.debug("Project %s no longer exists at %s", project.name, project.location)
            return None
        return project

    def resolve_class_file(self, path: str) -> Optional[ClassFile]:
        """Find a class file by path or URI across all projects' roots."""
        if not path:
            return None
        for project in self._projects.values():
            for root in project.all_package_roots():
                if not is_path_prefix(root.path, path) and not path.startswith(('jar:', 'file:')):
                    continue
                for package in root.packages():
                    for class_file in package.class_files():
                        if same_path(class_file.path, path) or class_file.uri == path:
                            return class_file
        return None
