"""
Build metadata attached to the application at build/publish time.

The build writes a flat JSON object (``build_metadata.json``) next to the
app. Keys are looked up case-insensitively.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BuildMetadataError(Exception):
    """Raised when the build metadata file exists but cannot be read."""


class BuildMetadata:
    def __init__(self, entries=None):
        self._entries = {}
        for key, value in (entries or {}).items():
            # First key wins when keys differ only by case
            self._entries.setdefault(str(key).casefold(), (key, value))

    @classmethod
    def from_file(cls, path):
        """
        Load metadata from a JSON file.

        A missing file gives an empty store. A file that is not a JSON object
        raises BuildMetadataError.
        """
        path = Path(path)
        if not path.is_file():
            logger.debug(f"No build metadata file at {path}")
            return cls()
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            raise BuildMetadataError(f"Could not read build metadata from {path}: {e}") from e
        if not isinstance(data, dict):
            raise BuildMetadataError(f"Build metadata in {path} must be a JSON object")
        return cls(data)

    def get(self, key, default=None):
        entry = self._entries.get(key.casefold())
        return entry[1] if entry else default

    def __contains__(self, key):
        return isinstance(key, str) and key.casefold() in self._entries

    def __len__(self):
        return len(self._entries)
