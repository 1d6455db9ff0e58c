"""Core abstractions for ClasspathTreeLib.

This module contains the node and query value types, the project model
interfaces that backends implement, and the error taxonomy.
"""

from .node import ClasspathNode, ClasspathNodeKind, ClasspathQuery
from .model import (
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
from .errors import (
    ClasspathError,
    ModelError,
    OperationCanceledError,
    RootNotFoundError,
    UnknownNodeKindError,
)
from .monitor import NullProgressMonitor, ProgressMonitor

__all__ = [
    "ClasspathNode",
    "ClasspathNodeKind",
    "ClasspathQuery",
    "ArchiveDirectory",
    "ArchiveFile",
    "ArchiveResource",
    "ClassFile",
    "ClasspathContainer",
    "ClasspathEntry",
    "EntryKind",
    "PackageFragment",
    "PackageRoot",
    "Project",
    "ProjectModel",
    "ClasspathError",
    "ModelError",
    "OperationCanceledError",
    "RootNotFoundError",
    "UnknownNodeKindError",
    "NullProgressMonitor",
    "ProgressMonitor",
]
