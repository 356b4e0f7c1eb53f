"""Persistence of rendered exports to the build output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from llmstxt.utils.files import write_text_exact

LOGGER = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes export files into a single output directory, overwriting them."""

    def __init__(self, out_dir: Path) -> None:
        self.out_dir = Path(out_dir)

    def path_for(self, file_name: str) -> Path:
        return self.out_dir / file_name

    def write(self, file_name: str, text: str) -> Path:
        target = self.path_for(file_name)
        write_text_exact(target, text)
        LOGGER.debug("Written %s (%d bytes)", file_name, len(text.encode("utf-8")))
        return target
