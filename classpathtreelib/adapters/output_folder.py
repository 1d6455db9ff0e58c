"""Output folder backend for ClasspathTreeLib.

Presents a compiled output directory (e.g. target/classes) as a package
root. Directories holding class files are packages; top-level files and
folders outside the Java view (META-INF, resource bundles) are raw
resources.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Sequence, Union

from ..core.errors import ModelError
from ..core.model import ArchiveDirectory, ArchiveFile, ArchiveResource, ClassFile, PackageFragment, PackageRoot
from ..core.paths import canonicalize
from ._listing import EntryListing, directory_of_package, package_name_of

logger = logging.getLogger(__name__)


class FolderPackageRoot(PackageRoot):
    """Package root backed by a directory of compiled output."""

    def __init__(self,
                 directory: Union[str, Path],
                 name: Optional[str] = None,
                 source_directory: Optional[Union[str, Path]] = None,
                 class_file_suffix: str = ".class"):
        """Initialize an output folder root.

        Args:
            directory: Output directory
            name: Display name (defaults to the directory name)
            source_directory: Optional source folder used as attached source
            class_file_suffix: Suffix identifying class files
        """
        self.directory = Path(directory)
        self._name = name
        self.source_directory = Path(source_directory) if source_directory is not None else None
        self.class_file_suffix = class_file_suffix

    @property
    def name(self) -> str:
        return self._name or self.directory.name

    @property
    def path(self) -> str:
        return canonicalize(self.directory.absolute().as_posix())

    def listing(self) -> EntryListing:
        """Walk the output directory.

        A missing directory lists as empty.

        Raises:
            ModelError: If the directory exists but cannot be read
        """
        if not self.directory.is_dir():
            logger.debug("Output folder no longer exists: %s", self.directory)
            return EntryListing([], self.class_file_suffix)

        def on_error(error: OSError):
            raise ModelError(f"Cannot read output folder {self.directory}: {error}") from error

        return EntryListing(self._walk(on_error), self.class_file_suffix)

    def _walk(self, on_error) -> Iterator[str]:
        for current, dirnames, filenames in os.walk(self.directory, onerror=on_error):
            relative = Path(current).relative_to(self.directory).as_posix()
            prefix = '' if relative == '.' else relative + '/'
            for dirname in dirnames:
                yield prefix + dirname + '/'
            for filename in filenames:
                yield prefix + filename

    def packages(self) -> Sequence[PackageFragment]:
        listing = self.listing()
        return [
            FolderPackageFragment(self, listing, package_name_of(directory))
            for directory in listing.package_directories()
        ]

    def raw_resources(self) -> Sequence[ArchiveResource]:
        listing = self.listing()
        return [
            FolderDirectory(self, listing, name) if is_directory else FolderFile(self, name)
            for name, is_directory in listing.raw_top_level()
        ]

    def file_for(self, relative: str) -> Path:
        """Absolute location of a relative entry name."""
        return self.directory.joinpath(*relative.split('/'))


class FolderPackageFragment(PackageFragment):
    """Package inside an output folder."""

    def __init__(self, root: FolderPackageRoot, listing: EntryListing, name: str):
        self.root = root
        self._listing = listing
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def class_files(self) -> Sequence[ClassFile]:
        directory = directory_of_package(self._name)
        return [FolderClassFile(self.root, entry) for entry in self._listing.class_entries(directory)]


class FolderClassFile(ClassFile):
    """Class file on disk."""

    def __init__(self, root: FolderPackageRoot, relative: str):
        self.root = root
        self.relative = relative

    @property
    def name(self) -> str:
        return self.relative.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return f"{self.root.path}/{self.relative}"

    @property
    def uri(self) -> str:
        return self.root.file_for(self.relative).absolute().as_uri()

    def attached_source(self) -> Optional[str]:
        """Read the matching .java file from the root's source folder, if any."""
        if self.root.source_directory is None:
            return None
        stem = self.relative[:-len(self.root.class_file_suffix)]
        directory, _, simple_name = stem.rpartition('/')
        outer = simple_name.split('$', 1)[0] + '.java'
        source = self.root.source_directory.joinpath(*directory.split('/'), outer) if directory \
            else self.root.source_directory / outer
        try:
            return source.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ModelError(f"Cannot read source {source}: {e}") from e


class FolderDirectory(ArchiveDirectory):
    """Raw resource folder inside an output folder."""

    def __init__(self, root: FolderPackageRoot, listing: EntryListing, relative: str):
        self.root = root
        self._listing = listing
        self.relative = relative

    @property
    def name(self) -> str:
        return self.relative.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return '/' + self.relative

    def children(self) -> Sequence[ArchiveResource]:
        result: List[ArchiveResource] = []
        for child in self._listing.children(self.relative):
            if self._listing.is_directory(child):
                result.append(FolderDirectory(self.root, self._listing, child))
            else:
                result.append(FolderFile(self.root, child))
        return result


class FolderFile(ArchiveFile):
    """Raw resource file inside an output folder."""

    def __init__(self, root: FolderPackageRoot, relative: str):
        self.root = root
        self.relative = relative

    @property
    def name(self) -> str:
        return self.relative.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return '/' + self.relative

    def open_bytes(self) -> BinaryIO:
        return open(self.root.file_for(self.relative), 'rb')
