"""Archive content reader.

Reads the bytes behind an archive entry and decodes them as text.
Missing or unreadable content is common for a tree browser, so read
failures are logged and reported as empty content.
"""

import logging
import zipfile

from ..core.model import ArchiveResource

logger = logging.getLogger(__name__)

_READ_ERRORS = (OSError, ValueError, zipfile.BadZipFile, UnicodeError)


def read_content(resource: ArchiveResource,
                 encoding: str = "utf-8",
                 errors: str = "replace") -> str:
    """Read and decode the whole content of an archive entry.

    The stream is closed on every exit path.

    Args:
        resource: Archive file to read
        encoding: Text encoding of the entry
        errors: Codec error handler

    Returns:
        Decoded text, or "" if the entry is empty or cannot be read
    """
    try:
        with resource.open_bytes() as stream:
            data = stream.read()
        if not data:
            return ""
        return data.decode(encoding, errors)
    except _READ_ERRORS as e:
        logger.warning("Can't read file content: %s (%s)", resource.path, e)
        return ""
