"""Testing utilities for ClasspathTreeLib consumers."""

from .fixtures import (
    InMemoryClassFile,
    InMemoryDirectory,
    InMemoryFile,
    InMemoryModel,
    InMemoryPackage,
    InMemoryPackageRoot,
    InMemoryProject,
    build_jar,
    container_entry,
    library_entry,
    source_entry,
)

__all__ = [
    'InMemoryClassFile',
    'InMemoryDirectory',
    'InMemoryFile',
    'InMemoryModel',
    'InMemoryPackage',
    'InMemoryPackageRoot',
    'InMemoryProject',
    'build_jar',
    'container_entry',
    'library_entry',
    'source_entry',
]
