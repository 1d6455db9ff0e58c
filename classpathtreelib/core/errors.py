"""Exception types for ClasspathTreeLib.

Only structural inconsistencies are raised to callers. "Nothing here"
outcomes are returned as empty lists or empty strings instead.
"""

from typing import Any, Dict, Optional


class ClasspathError(Exception):
    """Base exception for classpath navigation errors."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a user-facing error payload."""
        payload: Dict[str, Any] = {
            'type': self.__class__.__name__,
            'message': self.message,
        }
        if self.data:
            payload['data'] = dict(self.data)
        return payload


class RootNotFoundError(ClasspathError):
    """Raised when a query names a root path that resolves to no root."""

    def __init__(self, root_path: Optional[str], path: Optional[str] = None,
                 module_name: Optional[str] = None):
        super().__init__(
            f"No package root found for {path if path is not None else root_path}",
            data={'rootPath': root_path, 'path': path, 'moduleName': module_name},
        )
        self.root_path = root_path
        self.path = path
        self.module_name = module_name


class UnknownNodeKindError(ClasspathError):
    """Raised when a node kind has no resolver (client/server mismatch)."""

    def __init__(self, kind: Any):
        super().__init__(f"Unknown classpath item type: {kind}", data={'kind': str(kind)})
        self.kind = kind


class OperationCanceledError(ClasspathError):
    """Raised when a running query notices its monitor was canceled."""

    def __init__(self, message: str = "Operation canceled"):
        super().__init__(message)


class ModelError(ClasspathError):
    """Raised by project model backends for unreadable model state.

    Resolvers log it and degrade to an empty result.
    """
    pass
