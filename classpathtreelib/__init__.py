"""ClasspathTreeLib - Lazy dependency-tree navigation for Java classpaths.

ClasspathTreeLib answers two questions about a project's build classpath
without ever materializing the whole tree:

━━━━━━━━━━━━━━━━━━━━━━━━━━
What are the children of this node?
    navigator.get_children(ClasspathNodeKind.JAR, query)

What is the content behind this node?
    navigator.get_source(query)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Containers, jars, packages, class files and raw archive entries are all
presented as ClasspathNode values. The project model is injected, so the
same navigator works against a real workspace or an in-memory fake.
"""

import logging

__version__ = "0.1.0"

from .core import (
    ClasspathError,
    ClasspathNode,
    ClasspathNodeKind,
    ClasspathQuery,
    ModelError,
    NullProgressMonitor,
    OperationCanceledError,
    ProgressMonitor,
    ProjectModel,
    RootNotFoundError,
    UnknownNodeKindError,
)
from .config import NavigatorConfig
from .logging_config import LoggingConfig, configure_logging
from .navigator import ClasspathNavigator, parse_kind, sort_nodes
from .roots import resolve_root
from .api import (
    get_children,
    get_children_from_arguments,
    get_source,
    get_source_from_arguments,
    nodes_to_dicts,
    parse_query,
)
from .adapters import FolderPackageRoot, Workspace, WorkspaceProject, ZipPackageRoot

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "ClasspathNode",
    "ClasspathNodeKind",
    "ClasspathQuery",
    "ProjectModel",
    "ProgressMonitor",
    "NullProgressMonitor",
    # Errors
    "ClasspathError",
    "ModelError",
    "OperationCanceledError",
    "RootNotFoundError",
    "UnknownNodeKindError",
    # Config
    "NavigatorConfig",
    "LoggingConfig",
    "configure_logging",
    # Navigation
    "ClasspathNavigator",
    "resolve_root",
    "parse_kind",
    "sort_nodes",
    # API
    "get_children",
    "get_children_from_arguments",
    "get_source",
    "get_source_from_arguments",
    "nodes_to_dicts",
    "parse_query",
    # Backends
    "FolderPackageRoot",
    "Workspace",
    "WorkspaceProject",
    "ZipPackageRoot",
]
