"""Test fixtures for ClasspathTreeLib consumers.

These fixtures build small project models without a real workspace:
jars written to a temporary directory, and fully in-memory roots and
projects for exercising the navigator against exact shapes.
"""

import io
import zipfile
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..core.errors import ModelError
from ..core.model import (
    ArchiveDirectory,
    ArchiveFile,
    ArchiveResource,
    ClassFile,
    ClasspathContainer,
    ClasspathEntry,
    EntryKind,
    PackageFragment,
    PackageRoot,
    Project,
    ProjectModel,
)
from ..core.paths import same_path

Content = Union[bytes, str, None]


def build_jar(path: Union[str, Path], entries: Mapping[str, Content]) -> Path:
    """Write a jar/zip file.

    Args:
        path: Destination file
        entries: Entry name to content; names ending in '/' create
            explicit directory entries, str content is UTF-8 encoded

    Returns:
        Path of the written archive
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, 'w') as archive:
        for name, content in entries.items():
            if name.endswith('/'):
                archive.writestr(zipfile.ZipInfo(name), b'')
            elif isinstance(content, str):
                archive.writestr(name, content.encode('utf-8'))
            else:
                archive.writestr(name, content or b'')
    return path


class InMemoryFile(ArchiveFile):
    """Archive file whose content lives in memory.

    Passing an exception as content makes open_bytes() raise it.
    """

    def __init__(self, path: str, content: Union[bytes, Exception] = b''):
        self._path = path
        self.content = content
        self.open_count = 0
        self.closed_count = 0

    @property
    def name(self) -> str:
        return self._path.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return self._path

    def open_bytes(self) -> BinaryIO:
        if isinstance(self.content, Exception):
            raise self.content
        self.open_count += 1
        fixture = self

        class _TrackedStream(io.BytesIO):
            def close(self):
                if not self.closed:
                    fixture.closed_count += 1
                super().close()

        return _TrackedStream(self.content)


class InMemoryDirectory(ArchiveDirectory):
    """Archive directory holding in-memory children."""

    def __init__(self, path: str, children: Iterable[ArchiveResource] = ()):
        self._path = path
        self._children = list(children)

    @property
    def name(self) -> str:
        return self._path.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return self._path

    def children(self) -> Sequence[ArchiveResource]:
        return list(self._children)


class InMemoryClassFile(ClassFile):
    """Class file with optional attached source."""

    def __init__(self, name: str, path: Optional[str] = None, source: Optional[str] = None):
        self._name = name
        self._path = path or '/' + name
        self.source = source

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def uri(self) -> str:
        return 'memory://' + self._path.lstrip('/')

    def attached_source(self) -> Optional[str]:
        return self.source


class InMemoryPackage(PackageFragment):
    """Package listing the given class files."""

    def __init__(self, name: str, class_files: Iterable[ClassFile] = ()):
        self._name = name
        self._class_files = list(class_files)

    @property
    def name(self) -> str:
        return self._name

    def class_files(self) -> Sequence[ClassFile]:
        return list(self._class_files)


class InMemoryPackageRoot(PackageRoot):
    """Package root with fixed packages and raw resources."""

    def __init__(self, path: str, name: Optional[str] = None, module_name: Optional[str] = None,
                 packages: Iterable[PackageFragment] = (),
                 raw_resources: Iterable[ArchiveResource] = ()):
        self._path = path
        self._name = name or path.rsplit('/', 1)[-1]
        self._module_name = module_name
        self._packages = list(packages)
        self._raw_resources = list(raw_resources)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def module_name(self) -> Optional[str]:
        return self._module_name

    def packages(self) -> Sequence[PackageFragment]:
        return list(self._packages)

    def raw_resources(self) -> Sequence[ArchiveResource]:
        return list(self._raw_resources)


class InMemoryProject(Project):
    """Project with a fixed raw classpath.

    Args:
        name: Project name
        entries: Raw classpath entries
        containers: Container descriptions by entry path; a ModelError
            value makes resolve_container() raise it
        roots: Package roots by entry path
        transitive_roots: Extra roots only reachable through all_package_roots()
    """

    def __init__(self, name: str,
                 entries: Iterable[ClasspathEntry] = (),
                 containers: Optional[Mapping[str, Union[ClasspathContainer, ModelError]]] = None,
                 roots: Optional[Mapping[str, Iterable[PackageRoot]]] = None,
                 transitive_roots: Iterable[PackageRoot] = ()):
        self._name = name
        self.entries = list(entries)
        self.containers = dict(containers or {})
        self.roots = {path: list(value) for path, value in (roots or {}).items()}
        self.transitive_roots = list(transitive_roots)

    @property
    def name(self) -> str:
        return self._name

    def raw_classpath(self) -> Sequence[ClasspathEntry]:
        return list(self.entries)

    def resolve_container(self, entry_path: str) -> Optional[ClasspathContainer]:
        container = self.containers.get(entry_path)
        if isinstance(container, ModelError):
            raise container
        return container

    def find_package_roots(self, entry: ClasspathEntry) -> Sequence[PackageRoot]:
        return list(self.roots.get(entry.path, ()))

    def all_package_roots(self) -> Sequence[PackageRoot]:
        result: List[PackageRoot] = []
        for roots in self.roots.values():
            result.extend(roots)
        result.extend(self.transitive_roots)
        return result

    def find_package_root(self, path: str) -> Optional[PackageRoot]:
        # Direct lookup only sees roots of direct entries
        for roots in self.roots.values():
            for root in roots:
                if same_path(root.path, path):
                    return root
        return None


class InMemoryModel(ProjectModel):
    """Project model mapping project URIs to projects."""

    def __init__(self, projects: Optional[Mapping[str, Project]] = None,
                 class_files: Iterable[ClassFile] = ()):
        self._projects: Dict[str, Project] = dict(projects or {})
        self._class_files = list(class_files)

    def find_project_by_uri(self, uri: str) -> Optional[Project]:
        return self._projects.get(uri)

    def resolve_class_file(self, path: str) -> Optional[ClassFile]:
        for class_file in self._class_files:
            if class_file.path == path or class_file.uri == path:
                return class_file
        return None

    def projects(self) -> List[Project]:
        return list(self._projects.values())


def library_entry(path: str) -> ClasspathEntry:
    """Shorthand for a LIBRARY classpath entry."""
    return ClasspathEntry(EntryKind.LIBRARY, path)


def container_entry(path: str) -> ClasspathEntry:
    """Shorthand for a CONTAINER classpath entry."""
    return ClasspathEntry(EntryKind.CONTAINER, path)


def source_entry(path: str) -> ClasspathEntry:
    """Shorthand for a SOURCE classpath entry."""
    return ClasspathEntry(EntryKind.SOURCE, path)
