"""High-level API for ClasspathTreeLib.

This module provides simple functional interfaces over ClasspathNavigator,
including entry points that accept the raw argument lists a command
layer receives (a node kind followed by a query payload).
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .config import NavigatorConfig
from .core.model import ProjectModel
from .core.monitor import ProgressMonitor
from .core.node import ClasspathNode, ClasspathNodeKind, ClasspathQuery
from .navigator import ClasspathNavigator, parse_kind

KindLike = Union[ClasspathNodeKind, str, int]
QueryLike = Union[ClasspathQuery, Dict[str, Any]]


def get_children(model: ProjectModel,
                 kind: Optional[KindLike],
                 query: Optional[QueryLike],
                 config: Optional[NavigatorConfig] = None,
                 monitor: Optional[ProgressMonitor] = None) -> List[ClasspathNode]:
    """Get the sorted children of a node.

    Args:
        model: Project model to query
        kind: Kind of children as enum, wire name or rank
        query: Query as ClasspathQuery or wire payload
        config: Navigation settings
        monitor: Optional cancellation monitor

    Returns:
        Child nodes sorted by (kind rank, name)

    Example:
        >>> nodes = get_children(workspace, "JAR", {
        ...     "projectUri": "file:///work/app",
        ...     "path": "/work/app/lib/app.jar",
        ... })
    """
    if kind is None or query is None:
        return []
    navigator = ClasspathNavigator(model, config)
    return navigator.get_children(kind, parse_query(query), monitor)


def get_source(model: ProjectModel,
               query: Optional[QueryLike],
               config: Optional[NavigatorConfig] = None,
               monitor: Optional[ProgressMonitor] = None) -> str:
    """Get the textual content behind a class file or archive entry.

    Args:
        model: Project model to query
        query: Query as ClasspathQuery or wire payload
        config: Navigation settings
        monitor: Optional cancellation monitor

    Returns:
        The content, or "" if none is available
    """
    if query is None:
        return ""
    navigator = ClasspathNavigator(model, config)
    return navigator.get_source(parse_query(query), monitor)


def get_children_from_arguments(model: ProjectModel,
                                arguments: Optional[Sequence[Any]],
                                config: Optional[NavigatorConfig] = None,
                                monitor: Optional[ProgressMonitor] = None) -> List[Dict[str, Any]]:
    """Command entry point: [kind, query] in, node payloads out.

    Args:
        model: Project model to query
        arguments: Argument list; fewer than two entries yields []
        config: Navigation settings
        monitor: Optional cancellation monitor

    Returns:
        Wire payloads of the sorted child nodes
    """
    if arguments is None or len(arguments) < 2:
        return []
    return nodes_to_dicts(get_children(model, arguments[0], arguments[1], config, monitor))


def get_source_from_arguments(model: ProjectModel,
                              arguments: Optional[Sequence[Any]],
                              config: Optional[NavigatorConfig] = None,
                              monitor: Optional[ProgressMonitor] = None) -> str:
    """Command entry point: [query] in, content out."""
    if not arguments:
        return ""
    return get_source(model, arguments[0], config, monitor)


def nodes_to_dicts(nodes: Iterable[ClasspathNode]) -> List[Dict[str, Any]]:
    """Convert nodes to their wire payloads."""
    return [node.to_dict() for node in nodes]


# Helper functions

def parse_query(query: QueryLike) -> ClasspathQuery:
    """Parse a query from a ClasspathQuery or wire payload."""
    if isinstance(query, ClasspathQuery):
        return query
    if isinstance(query, dict):
        return ClasspathQuery.from_dict(query)
    raise TypeError(f"Cannot build a ClasspathQuery from {type(query).__name__}")
