"""Local filesystem staging for uploaded image bytes."""

import logging
import os
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import StagingError

logger = logging.getLogger(__name__)


def ensure_directory(path: str | os.PathLike) -> Path:
    """Create ``path`` (and parents) if missing. Succeeds if it already exists."""
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StagingError(f"could not create staging directory {directory}: {exc}") from exc
    return directory


def write_bytes(path: str | os.PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing whatever was there."""
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise StagingError(f"could not write {path}: {exc}") from exc


class StagingStore:
    """
    Holds uploaded bytes on disk while the image codec reads them.

    Each call to ``staged`` gets its own uuid-named file, so concurrent
    requests never share a staging path.

    Args:
        directory: Directory that receives staged files (created on demand)
    """

    def __init__(self, directory: str | os.PathLike):
        self.directory = Path(directory)

    def new_path(self) -> Path:
        return self.directory / f"upload-{uuid.uuid4().hex}.bin"

    def stage(self, data: bytes) -> Path:
        """
        Persist ``data`` under a fresh name.

        Returns:
            Path of the staged file
        """
        ensure_directory(self.directory)
        path = self.new_path()
        write_bytes(path, data)
        logger.debug("Staged %d bytes at %s", len(data), path)
        return path

    def discard(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove staged file %s: %s", path, exc)

    @contextmanager
    def staged(self, data: bytes) -> Iterator[Path]:
        """Stage ``data`` for the duration of the ``with`` block."""
        path = self.stage(data)
        try:
            yield path
        finally:
            self.discard(path)


class HexCache:
    """
    Best-effort copy of the most recent hex encoding.

    Failures are logged and never raised: the cache is a debugging aid and
    must not influence request outcomes.
    """

    def __init__(self, path: str | os.PathLike, enabled: bool = True):
        self.path = Path(path)
        self.enabled = enabled

    def store(self, hex_text: str) -> bool:
        """Write ``hex_text`` to the cache file. Returns True on success."""
        if not self.enabled:
            return False

        # Write beside the target and swap in, so readers never see a torn file.
        tmp_path = self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(hex_text, encoding="ascii")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Could not update hex cache %s: %s", self.path, exc)
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                pass
            return False
        return True
