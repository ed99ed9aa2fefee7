"""Content store — read-only access to the quotes file and page templates."""

import logging
from pathlib import Path

from . import config

log = logging.getLogger(__name__)


class ContentError(Exception):
    """Raised when a content file is missing, unreadable or outside the store."""

    def __init__(self, path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class ContentStore:
    """A read-only view over a directory of shipped files.

    The app never writes through the store; every request reads fresh text
    from disk, so nothing here is cached or shared between threads.
    """

    def __init__(self, root: Path | str = config.CONTENT_DIR):
        self.root = Path(root).resolve()

    @property
    def template_dir(self) -> Path:
        return self.root / config.TEMPLATES_DIRNAME

    def path_for(self, relative_path: str) -> Path:
        path = (self.root / relative_path).resolve()
        if not path.is_relative_to(self.root):
            raise ContentError(relative_path, "Path escapes content root")
        return path

    def read_text(self, relative_path: str) -> str:
        path = self.path_for(relative_path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Failed to read content file %s", path, exc_info=True)
            raise ContentError(relative_path, f"Could not read file ({e.__class__.__name__})") from e
