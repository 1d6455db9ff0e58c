"""Entry listing shared by the archive and output folder backends.

Both backends start from a flat list of relative entry names ('a/b/C.class',
'META-INF/MANIFEST.MF', 'META-INF/'). EntryListing splits that list into
the Java view (packages holding class files) and the raw view (every
top-level file or folder that is not part of a package).
"""

from typing import Dict, Iterable, List, Set, Tuple


def is_package_segment(segment: str) -> bool:
    """Check if a directory name can be part of a Java package name."""
    return bool(segment) and segment.replace('$', '_').isidentifier()


def package_name_of(directory: str) -> str:
    """Dotted package name for a relative directory ('' is the unnamed package)."""
    return directory.replace('/', '.')


def directory_of_package(name: str) -> str:
    """Relative directory for a dotted package name."""
    return name.replace('.', '/')


class EntryListing:
    """Immutable snapshot of the entries of one package root.

    A listing is built per call and discarded with the nodes it produced,
    so it never goes stale across queries.
    """

    def __init__(self, names: Iterable[str], class_file_suffix: str = ".class"):
        """Build the listing.

        Args:
            names: Relative entry names; directories end with '/'
            class_file_suffix: Suffix identifying class files
        """
        self.class_file_suffix = class_file_suffix
        self.files: Set[str] = set()
        self.directories: Set[str] = set()
        self._children: Dict[str, Set[str]] = {'': set()}

        for raw_name in names:
            name = raw_name.replace('\\', '/').lstrip('/')
            if not name:
                continue
            if name.endswith('/'):
                self._add_directory(name.rstrip('/'))
            else:
                self.files.add(name)
                self._add_child(name)

    def _add_directory(self, directory: str) -> None:
        if not directory or directory in self.directories:
            return
        self.directories.add(directory)
        self._children.setdefault(directory, set())
        self._add_child(directory)

    def _add_child(self, name: str) -> None:
        parent = name.rsplit('/', 1)[0] if '/' in name else ''
        if parent:
            self._add_directory(parent)
        self._children.setdefault(parent, set()).add(name)

    def is_directory(self, name: str) -> bool:
        return name in self.directories

    def children(self, directory: str) -> List[str]:
        """Relative names of the immediate children of a directory."""
        return sorted(self._children.get(directory, ()))

    def is_class_file(self, name: str) -> bool:
        return name in self.files and name.endswith(self.class_file_suffix)

    def is_package_directory(self, directory: str) -> bool:
        """Check if every segment of a relative directory is a package segment."""
        if directory == '':
            return True
        return all(is_package_segment(segment) for segment in directory.split('/'))

    def package_directories(self) -> List[str]:
        """Relative directories that form packages, the root ('') included."""
        return [''] + sorted(d for d in self.directories if self.is_package_directory(d))

    def class_entries(self, directory: str) -> List[str]:
        """Class file entries directly inside a package directory."""
        if directory != '' and directory not in self.directories:
            return []
        return [name for name in self.children(directory) if self.is_class_file(name)]

    def raw_top_level(self) -> List[Tuple[str, bool]]:
        """Top-level entries that do not belong to the Java view.

        Returns:
            (relative name, is_directory) pairs
        """
        result = []
        for name in self.children(''):
            if self.is_directory(name):
                if not is_package_segment(name):
                    result.append((name, True))
            elif not self.is_class_file(name):
                result.append((name, False))
        return result
