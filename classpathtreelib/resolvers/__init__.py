"""Tree-level resolvers, one per ClasspathNodeKind."""

from .base import LevelResolver
from .containers import ContainerResolver, JarResolver
from .packages import PackageResolver
from .classfiles import ClassFileResolver, FileResolver, FolderResolver

__all__ = [
    "LevelResolver",
    "ContainerResolver",
    "JarResolver",
    "PackageResolver",
    "ClassFileResolver",
    "FolderResolver",
    "FileResolver",
]
