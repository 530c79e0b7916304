"""
I/O utilities for atomic file operations.
A saved game is either fully on disk or not there at all.
"""
import os
import yaml
import tempfile
from pathlib import Path
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


def atomic_write_yaml(filepath: Path, data: Dict[str, Any]) -> None:
    """
    Write YAML file atomically using temporary file + os.replace().

    Args:
        filepath: Target file path
        data: Dictionary to serialize as YAML

    Raises:
        PermissionError: If the target directory is not writable
        IOError: If write operation fails
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Create temp file in same directory (ensures same filesystem)
    fd, temp_path = tempfile.mkstemp(
        dir=filepath.parent,
        prefix=f".{filepath.stem}_",
        suffix=".tmp"
    )

    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

        os.replace(temp_path, filepath)
        logger.debug(f"Atomically wrote {filepath}")

    except Exception as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        logger.error(f"Failed to write {filepath}: {e}")
        if isinstance(e, PermissionError):
            raise
        raise IOError(f"Atomic write failed: {e}") from e


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Load a YAML file.

    Args:
        filepath: Path to YAML file

    Returns:
        Parsed dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
        yaml.YAMLError: If file is malformed
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        logger.debug(f"Loaded {filepath}")
        return data if data is not None else {}

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse {filepath}: {e}")
        raise

