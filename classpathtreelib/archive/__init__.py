"""Archive access: locating raw entries and reading their content."""

from .reader import read_content
from .walker import find_children, find_file

__all__ = [
    "read_content",
    "find_children",
    "find_file",
]
