"""Configuration system for ClasspathTreeLib.

This module defines how users tune navigation: which names count as
nested types, how archive content is decoded, and what is surfaced
alongside Java packages.
"""

import codecs
from dataclasses import dataclass
from typing import List


@dataclass
class NavigatorConfig:
    """Configuration for a ClasspathNavigator.

    The defaults match how Java tooling presents a classpath.
    """

    # Class file listing
    nested_type_marker: str = "$"       # Class names containing this are hidden
    class_file_suffix: str = ".class"   # Suffix identifying class files in archives/folders

    # Content decoding
    content_encoding: str = "utf-8"
    decode_errors: str = "replace"      # Codec error handler for archive entries

    # Package level
    include_raw_resources: bool = True  # Show non-Java resources next to packages

    # Error handling
    log_errors: bool = True             # Log raised errors at the navigator boundary

    @classmethod
    def strict(cls) -> 'NavigatorConfig':
        """Create config that refuses undecodable archive content.

        Undecodable entries then read as empty content instead of
        containing replacement characters.

        Returns:
            NavigatorConfig with strict decoding
        """
        return cls(decode_errors="strict")

    def is_nested_type(self, name: str) -> bool:
        """Check if a class file name denotes a nested/inner type."""
        return self.nested_type_marker in name

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.nested_type_marker:
            errors.append("nested_type_marker cannot be empty")

        if not self.class_file_suffix:
            errors.append("class_file_suffix cannot be empty")

        try:
            codecs.lookup(self.content_encoding)
        except LookupError:
            errors.append(f"unknown content_encoding: {self.content_encoding}")

        try:
            codecs.lookup_error(self.decode_errors)
        except LookupError:
            errors.append(f"unknown decode_errors handler: {self.decode_errors}")

        return errors
