"""Node and query value types for ClasspathTreeLib.

A ClasspathNode is intentionally kept simple - it's a data container
describing one entry of the dependency tree. Navigation logic lives in
the resolvers, which turn a ClasspathQuery into a list of child nodes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class ClasspathNodeKind(Enum):
    """What a node represents.

    The value doubles as the sort rank: containers sort before jars,
    jars before packages, and so on in declaration order.
    """
    CONTAINER = 1
    JAR = 2
    PACKAGE = 3
    CLASSFILE = 4
    FOLDER = 5
    FILE = 6

    @property
    def rank(self) -> int:
        """Sort rank of this kind (lower sorts first)."""
        return self.value

    @property
    def wire_name(self) -> str:
        """Name used in request/response payloads."""
        return _WIRE_NAMES[self]

    @classmethod
    def parse(cls, value: Union['ClasspathNodeKind', str, int]) -> 'ClasspathNodeKind':
        """Parse a kind from an enum member, wire name or integer value.

        Args:
            value: Kind as enum, name (case-insensitive) or rank

        Returns:
            ClasspathNodeKind member

        Raises:
            ValueError: If the value names no known kind
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, bool):
            raise ValueError(f"Unknown classpath item type: {value!r}")

        if isinstance(value, int):
            return cls(value)

        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
            if key.isdigit():
                return cls(int(key))

        raise ValueError(f"Unknown classpath item type: {value!r}")


_WIRE_NAMES = {
    ClasspathNodeKind.CONTAINER: "CONTAINER",
    ClasspathNodeKind.JAR: "JAR",
    ClasspathNodeKind.PACKAGE: "PACKAGE",
    ClasspathNodeKind.CLASSFILE: "CLASSFILE",
    ClasspathNodeKind.FOLDER: "Folder",
    ClasspathNodeKind.FILE: "FILE",
}


@dataclass(frozen=True)
class ClasspathNode:
    """One entry of the dependency tree.

    Attributes:
        name: Display label
        path: Portable slash-separated handle passed back in later queries;
            None for class files surfaced from the unnamed package
        kind: What the node represents
        uri: Resolvable locator, set only for class files
        module_name: Module name, set only for module-path jar roots
    """
    name: str
    path: Optional[str]
    kind: ClasspathNodeKind
    uri: Optional[str] = None
    module_name: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.kind, ClasspathNodeKind):
            raise ValueError(f"kind must be a ClasspathNodeKind, got {self.kind!r}")
        if (self.uri is not None) != (self.kind is ClasspathNodeKind.CLASSFILE):
            raise ValueError(f"uri must be set exactly for class file nodes: {self.name!r}")
        if self.module_name is not None and self.kind is not ClasspathNodeKind.JAR:
            raise ValueError(f"module_name is only allowed on jar nodes: {self.name!r}")

    @property
    def sort_key(self):
        """Ordering key: kind rank first, then name."""
        return (self.kind.rank, self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire payload, omitting absent optional fields."""
        payload: Dict[str, Any] = {
            'name': self.name,
            'kind': self.kind.rank,
        }
        if self.path is not None:
            payload['path'] = self.path
        if self.uri is not None:
            payload['uri'] = self.uri
        if self.module_name is not None:
            payload['moduleName'] = self.module_name
        return payload

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'ClasspathNode':
        """Build a node from its wire payload."""
        return cls(
            name=payload['name'],
            path=payload.get('path'),
            kind=ClasspathNodeKind.parse(payload['kind']),
            uri=payload.get('uri'),
            module_name=payload.get('moduleName'),
        )

    def __str__(self) -> str:
        return self.path or self.name


@dataclass(frozen=True)
class ClasspathQuery:
    """Request descriptor for a children or content query.

    Attributes:
        project_uri: Identifies the owning project by location
        path: Node being expanded or read; container path, package name or
            archive-internal path depending on the node kind
        root_path: Canonical path of the backing root; None for container
            level queries and plain class files
        module_name: Disambiguates roots that share root_path
    """
    project_uri: str
    path: Optional[str] = None
    root_path: Optional[str] = None
    module_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire payload."""
        return {
            'projectUri': self.project_uri,
            'path': self.path,
            'rootPath': self.root_path,
            'moduleName': self.module_name,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'ClasspathQuery':
        """Build a query from a wire payload (camelCase or snake_case keys)."""
        def pick(*keys):
            for key in keys:
                if payload.get(key) is not None:
                    return payload[key]
            return None

        return cls(
            project_uri=pick('projectUri', 'project_uri') or '',
            path=pick('path'),
            root_path=pick('rootPath', 'root_path'),
            module_name=pick('moduleName', 'module_name'),
        )
