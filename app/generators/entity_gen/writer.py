"""File writer for entity generation."""
import logging
from pathlib import Path
from typing import List
from app.generators.entity_gen.types import GeneratedFile

log = logging.getLogger(__name__)


def write_files(files: List[GeneratedFile], out_dir: Path) -> List[Path]:
    """
    Write generated files to the output directory.

    Args:
        files: List of GeneratedFile objects to write
        out_dir: Base output directory path

    Returns:
        Paths of the written files
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for file in files:
        file_path = out_dir / file.path
        # Create parent directories if needed
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")
        log.info("Wrote %s (%d bytes)", file_path, len(file.content))
        written.append(file_path)
    return written
