"""Archive (jar/zip) backend for ClasspathTreeLib.

Presents a jar two ways at once: as packages of class files (the Java
view) and as a raw directory tree of everything else, such as META-INF.
The archive is re-read for every call, so a jar replaced on disk is
picked up by the next query.
"""

import io
import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, Union

from ..core.errors import ModelError
from ..core.model import ArchiveDirectory, ArchiveFile, ArchiveResource, ClassFile, PackageFragment, PackageRoot
from ..core.paths import canonicalize
from ._listing import EntryListing, directory_of_package, package_name_of

logger = logging.getLogger(__name__)

MANIFEST_PATH = "META-INF/MANIFEST.MF"


class ZipPackageRoot(PackageRoot):
    """Package root backed by a jar or zip file.

    Example:
        >>> root = ZipPackageRoot("/work/app/lib/app.jar")
        >>> [package.name for package in root.packages()]
        ['', 'com.example']
    """

    def __init__(self,
                 archive_path: Union[str, Path],
                 module_name: Optional[str] = None,
                 source_archive: Optional[Union[str, Path]] = None,
                 class_file_suffix: str = ".class"):
        """Initialize an archive root.

        Args:
            archive_path: Path of the jar/zip file
            module_name: Module name when the archive sits on the module path
            source_archive: Optional sources jar used as attached source
            class_file_suffix: Suffix identifying class files
        """
        self.archive_path = Path(archive_path)
        self._module_name = module_name
        self.source_archive = Path(source_archive) if source_archive is not None else None
        self.class_file_suffix = class_file_suffix

    @classmethod
    def for_module_path(cls, archive_path: Union[str, Path], **kwargs) -> 'ZipPackageRoot':
        """Create a module-path root, naming it like an automatic module.

        The name comes from the manifest's Automatic-Module-Name header,
        falling back to the file name without extension.
        """
        archive_path = Path(archive_path)
        module_name = read_automatic_module_name(archive_path) or archive_path.stem
        return cls(archive_path, module_name=module_name, **kwargs)

    @property
    def name(self) -> str:
        return self.archive_path.name

    @property
    def path(self) -> str:
        return canonicalize(self.archive_path.absolute().as_posix())

    @property
    def module_name(self) -> Optional[str]:
        return self._module_name

    def listing(self) -> EntryListing:
        """Read the archive's entry names.

        A missing archive lists as empty; an unreadable one raises.

        Raises:
            ModelError: If the archive exists but cannot be read
        """
        try:
            with zipfile.ZipFile(self.archive_path) as archive:
                names = archive.namelist()
        except FileNotFoundError:
            logger.debug("Archive no longer exists: %s", self.archive_path)
            names = []
        except (OSError, zipfile.BadZipFile) as e:
            raise ModelError(f"Cannot read archive {self.archive_path}: {e}") from e
        return EntryListing(names, self.class_file_suffix)

    def packages(self) -> Sequence[PackageFragment]:
        listing = self.listing()
        return [
            ZipPackageFragment(self, listing, package_name_of(directory))
            for directory in listing.package_directories()
        ]

    def get_package(self, name: Optional[str]) -> Optional[PackageFragment]:
        if name is None:
            return None
        listing = self.listing()
        directory = directory_of_package(name)
        if directory and not (listing.is_directory(directory) and listing.is_package_directory(directory)):
            return None
        return ZipPackageFragment(self, listing, name)

    def raw_resources(self) -> Sequence[ArchiveResource]:
        listing = self.listing()
        return [
            ZipArchiveDirectory(self, listing, name) if is_directory else ZipArchiveFile(self, name)
            for name, is_directory in listing.raw_top_level()
        ]

    def read_entry(self, entry_name: str) -> bytes:
        """Read one entry fully.

        Raises:
            FileNotFoundError: If the archive or the entry is missing
            OSError: If the archive cannot be read
        """
        try:
            with zipfile.ZipFile(self.archive_path) as archive:
                with archive.open(entry_name) as stream:
                    return stream.read()
        except KeyError:
            raise FileNotFoundError(f"{self.archive_path}!/{entry_name}") from None
        except zipfile.BadZipFile as e:
            raise OSError(f"Cannot read archive {self.archive_path}: {e}") from e

    def entry_uri(self, entry_name: str) -> str:
        """Locator for an entry, in jar URL form."""
        return f"jar:{self.archive_path.absolute().as_uri()}!/{entry_name}"


class ZipPackageFragment(PackageFragment):
    """Package inside an archive."""

    def __init__(self, root: ZipPackageRoot, listing: EntryListing, name: str):
        self.root = root
        self._listing = listing
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def class_files(self) -> Sequence[ClassFile]:
        directory = directory_of_package(self._name)
        return [ZipClassFile(self.root, entry) for entry in self._listing.class_entries(directory)]


class ZipClassFile(ClassFile):
    """Class file entry inside an archive."""

    def __init__(self, root: ZipPackageRoot, entry_name: str):
        self.root = root
        self.entry_name = entry_name

    @property
    def name(self) -> str:
        return self.entry_name.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return f"{self.root.path}/{self.entry_name}"

    @property
    def uri(self) -> str:
        return self.root.entry_uri(self.entry_name)

    def source_entry_name(self) -> str:
        """Name of the .java entry holding this class's outermost type."""
        stem = self.entry_name[:-len(self.root.class_file_suffix)]
        directory, _, simple_name = stem.rpartition('/')
        outer = simple_name.split('$', 1)[0]
        return f"{directory}/{outer}.java" if directory else f"{outer}.java"

    def attached_source(self) -> Optional[str]:
        """Read this class's source from the root's sources jar, if any.

        Raises:
            ModelError: If the sources jar exists but cannot be read
        """
        if self.root.source_archive is None:
            return None
        try:
            with zipfile.ZipFile(self.root.source_archive) as archive:
                data = archive.read(self.source_entry_name())
        except (KeyError, FileNotFoundError):
            return None
        except (OSError, zipfile.BadZipFile) as e:
            raise ModelError(f"Cannot read source attachment {self.root.source_archive}: {e}") from e
        return data.decode("utf-8", "replace")


class ZipArchiveDirectory(ArchiveDirectory):
    """Directory inside an archive's raw resource tree."""

    def __init__(self, root: ZipPackageRoot, listing: EntryListing, entry_name: str):
        self.root = root
        self._listing = listing
        self.entry_name = entry_name

    @property
    def name(self) -> str:
        return self.entry_name.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return '/' + self.entry_name

    def children(self) -> Sequence[ArchiveResource]:
        result: List[ArchiveResource] = []
        for child in self._listing.children(self.entry_name):
            if self._listing.is_directory(child):
                result.append(ZipArchiveDirectory(self.root, self._listing, child))
            else:
                result.append(ZipArchiveFile(self.root, child))
        return result


class ZipArchiveFile(ArchiveFile):
    """File inside an archive's raw resource tree."""

    def __init__(self, root: ZipPackageRoot, entry_name: str):
        self.root = root
        self.entry_name = entry_name

    @property
    def name(self) -> str:
        return self.entry_name.rsplit('/', 1)[-1]

    @property
    def path(self) -> str:
        return '/' + self.entry_name

    def open_bytes(self) -> BinaryIO:
        # The archive is closed before returning; the entry is buffered.
        return io.BytesIO(self.root.read_entry(self.entry_name))


def read_automatic_module_name(archive_path: Union[str, Path]) -> Optional[str]:
    """Read the Automatic-Module-Name manifest header of a jar.

    Returns:
        The module name, or None if the jar has no such header or
        cannot be read
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            manifest = archive.read(MANIFEST_PATH).decode("utf-8", "replace")
    except (KeyError, OSError, zipfile.BadZipFile):
        return None

    for line in manifest.splitlines():
        key, sep, value = line.partition(':')
        if sep and key.strip() == "Automatic-Module-Name":
            return value.strip() or None
    return None
