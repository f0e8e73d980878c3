"""
Invocation-private scratch files.

Each run gets its own directory under the temp root, so two concurrent runs
for identically named uploads never share a path. Inside it the source keeps
its base name and the JPEG is {stem}_converted.jpg.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from .keys import converted_file_name, source_file_name

logger = logging.getLogger(__name__)


class ScratchSpace:
    """Scratch directory holding the downloaded original and the transcoded JPEG."""

    def __init__(self, object_path: str, *, root: str | Path | None = None) -> None:
        self.directory = Path(tempfile.mkdtemp(prefix="heic_", dir=root or None))
        self.original = self.directory / source_file_name(object_path)
        self.converted = self.directory / converted_file_name(object_path)

    def cleanup(self) -> None:
        """Remove both scratch files and the directory. Never raises."""
        for path in (self.original, self.converted):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("scratch: failed to remove %s: %s", path, e)
        try:
            self.directory.rmdir()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("scratch: failed to remove directory %s: %s", self.directory, e)

    def __enter__(self) -> ScratchSpace:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()
