"""Archive tree walker.

Depth-first descent over the raw (non-Java) resources of a package
root. A target path is located by following only the directories that
contain it, so lookups touch a single branch of the archive.
"""

from typing import Iterable, List, Optional

from ..core.model import ArchiveFile, ArchiveResource
from ..core.monitor import ProgressMonitor
from ..core.paths import is_path_prefix, same_path


def find_children(resources: Iterable[ArchiveResource],
                  target_path: str,
                  monitor: Optional[ProgressMonitor] = None) -> Optional[List[ArchiveResource]]:
    """Find the immediate children of the directory at target_path.

    Args:
        resources: Top-level raw resources of a package root
        target_path: Portable path of the directory to expand
        monitor: Optional monitor polled between top-level resources

    Returns:
        The directory's children, or None if no directory matches

    Raises:
        OperationCanceledError: If the monitor was canceled
    """
    if target_path is None:
        return None

    for resource in resources:
        if monitor is not None:
            monitor.check_canceled()
        if not resource.is_directory():
            continue
        children = _find_directory_children(resource, target_path)
        if children is not None:
            return children
    return None


def _find_directory_children(directory: ArchiveResource,
                             target_path: str) -> Optional[List[ArchiveResource]]:
    if same_path(directory.path, target_path):
        return list(directory.children())

    if not is_path_prefix(directory.path, target_path):
        return None

    for child in directory.children():
        if same_path(child.path, target_path):
            return list(child.children())
        if child.is_directory() and is_path_prefix(child.path, target_path):
            result = _find_directory_children(child, target_path)
            if result is not None:
                return result
    return None


def find_file(resources: Iterable[ArchiveResource],
              target_path: str) -> Optional[ArchiveFile]:
    """Find the file leaf at target_path.

    Top-level files match directly; directories are only entered when
    they contain target_path.

    Args:
        resources: Top-level raw resources of a package root
        target_path: Portable path of the file

    Returns:
        The matching file, or None
    """
    if target_path is None:
        return None

    for resource in resources:
        if resource.is_directory():
            found = _find_file_in(resource, target_path)
            if found is not None:
                return found
        elif same_path(resource.path, target_path):
            return resource
    return None


def _find_file_in(directory: ArchiveResource, target_path: str) -> Optional[ArchiveFile]:
    if not is_path_prefix(directory.path, target_path):
        return None

    for child in directory.children():
        if child.is_directory():
            found = _find_file_in(child, target_path)
            if found is not None:
                return found
        elif same_path(child.path, target_path):
            return child
    return None
