"""Project model backends.

Backends implement the model interfaces in core.model for concrete
storage: jar/zip archives, compiled output folders, and a workspace of
projects tying them together.
"""

from .zip_archive import ZipPackageRoot, read_automatic_module_name
from .output_folder import FolderPackageRoot
from .workspace import Workspace, WorkspaceProject, uri_to_path

__all__ = [
    "ZipPackageRoot",
    "read_automatic_module_name",
    "FolderPackageRoot",
    "Workspace",
    "WorkspaceProject",
    "uri_to_path",
]
