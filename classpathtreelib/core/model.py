"""Project model abstractions for ClasspathTreeLib.

The navigator never owns the project model - it is handed a read-only
ProjectModel and asks it questions. These abstract base classes define
the minimal interface a backend must implement.

The model may change underneath a running query (background indexing,
a jar replaced on disk). Implementations should return None or empty
sequences for resources that no longer exist, and raise ModelError only
when the model itself cannot be read.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional, Sequence

from . import paths


class EntryKind(Enum):
    """Kind of a raw classpath entry."""
    SOURCE = "source"
    LIBRARY = "library"
    PROJECT = "project"
    VARIABLE = "variable"
    CONTAINER = "container"


@dataclass(frozen=True)
class ClasspathEntry:
    """One raw (unresolved) entry of a project's build classpath."""
    kind: EntryKind
    path: str


@dataclass(frozen=True)
class ClasspathContainer:
    """A resolved group of classpath entries shown as one tree node."""
    description: str
    path: str


class ArchiveResource(ABC):
    """A file or directory inside an archive that is not a Java package.

    Examples are META-INF metadata, embedded configuration files and
    resource folders.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name (last path segment)."""
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """Portable full path inside the archive, e.g. '/META-INF/MANIFEST.MF'."""
        pass

    @abstractmethod
    def is_directory(self) -> bool:
        """Check if this resource is a directory."""
        pass

    def children(self) -> Sequence['ArchiveResource']:
        """Immediate children; files have none."""
        return []

    def open_bytes(self) -> BinaryIO:
        """Open the resource's byte stream.

        The caller owns the stream and must close it.

        Raises:
            IsADirectoryError: If the resource is a directory
        """
        raise IsADirectoryError(self.path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


class ArchiveDirectory(ArchiveResource):
    """Directory inside an archive."""

    def is_directory(self) -> bool:
        return True

    @abstractmethod
    def children(self) -> Sequence[ArchiveResource]:
        pass


class ArchiveFile(ArchiveResource):
    """File inside an archive."""

    def is_directory(self) -> bool:
        return False

    @abstractmethod
    def open_bytes(self) -> BinaryIO:
        pass


class ClassFile(ABC):
    """A compiled class file belonging to a package."""

    @property
    @abstractmethod
    def name(self) -> str:
        """File name, e.g. 'Foo.class' or 'Foo$Inner.class'."""
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """Portable path of the class file."""
        pass

    @property
    @abstractmethod
    def uri(self) -> str:
        """Locator a client can use to open the class file."""
        pass

    def attached_source(self) -> Optional[str]:
        """Source attached to this class file, or None if unavailable."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


class PackageFragment(ABC):
    """A Java package inside one package root."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Dotted package name; empty for the unnamed package."""
        pass

    @abstractmethod
    def class_files(self) -> Sequence[ClassFile]:
        """All class files of the package, nested types included."""
        pass

    @property
    def is_default(self) -> bool:
        """Check if this is the unnamed (default) package."""
        return self.name == ''

    def has_children(self) -> bool:
        """Check if the package contains anything."""
        return len(self.class_files()) > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class PackageRoot(ABC):
    """Concrete backing store for packages: an archive or output folder."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name, e.g. the jar file name."""
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """Canonical portable path of the root."""
        pass

    @property
    def module_name(self) -> Optional[str]:
        """Module name when this root is a named module."""
        return None

    @property
    def is_module(self) -> bool:
        """Check if this root is a module-path root."""
        return self.module_name is not None

    @abstractmethod
    def packages(self) -> Sequence[PackageFragment]:
        """Immediate packages of the root, the unnamed package included."""
        pass

    def get_package(self, name: Optional[str]) -> Optional[PackageFragment]:
        """Look up a package by dotted name.

        Default implementation scans packages(). Backends with an index
        can override.
        """
        if name is None:
            return None
        for package in self.packages():
            if package.name == name:
                return package
        return None

    def raw_resources(self) -> Sequence[ArchiveResource]:
        """Top-level resources that are not part of any package."""
        return []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


class Project(ABC):
    """One project of the workspace."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def raw_classpath(self) -> Sequence[ClasspathEntry]:
        """Raw classpath entries in declaration order."""
        pass

    @abstractmethod
    def resolve_container(self, entry_path: str) -> Optional[ClasspathContainer]:
        """Resolve a classpath entry path to its container description.

        Returns:
            The container, or None if it can no longer be resolved
        """
        pass

    @abstractmethod
    def find_package_roots(self, entry: ClasspathEntry) -> Sequence[PackageRoot]:
        """Package roots contributed by one raw classpath entry."""
        pass

    @abstractmethod
    def all_package_roots(self) -> Sequence[PackageRoot]:
        """Every package root of the project, direct and transitive."""
        pass

    def find_package_root(self, path: str) -> Optional[PackageRoot]:
        """Direct lookup of a root by canonical path.

        Default implementation scans all_package_roots().
        """
        for root in self.all_package_roots():
            if paths.same_path(root.path, path):
                return root
        return None

    def canonicalize(self, path: str) -> str:
        """Normalize a root path the way this project indexes roots."""
        return paths.canonicalize(path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class ProjectModel(ABC):
    """Read-only access to the workspace, injected into the navigator."""

    @abstractmethod
    def find_project_by_uri(self, uri: str) -> Optional[Project]:
        """Find the project whose location contains uri.

        Returns:
            The project, or None if no existing project contains it
        """
        pass

    def resolve_class_file(self, path: str) -> Optional[ClassFile]:
        """Resolve a plain class-file locator outside any query root."""
        return None

    def projects(self) -> List[Project]:
        """All known projects."""
        return []
