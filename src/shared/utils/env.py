"""Environment variable loading utilities.

This module provides consistent environment variable handling
across all functional modules.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env(env_file: Optional[str] = None, override: bool = False) -> None:
    """Load environment variables from .env file.

    Args:
        env_file: Path to .env file. If None, searches for .env in current
                 directory and parent directories.
        override: Whether to override existing environment variables.
    """
    env_paths = []
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            env_paths.append(env_path)
    else:
        current = Path.cwd()
        parents = list(current.parents)
        for parent in reversed(parents):
            candidate = parent / ".env"
            if candidate.exists():
                env_paths.append(candidate)
        candidate = current / ".env"
        if candidate.exists():
            env_paths.append(candidate)

    if not env_paths:
        logger.debug("No .env file found, using system environment")
        return

    seen = set()
    for path in env_paths:
        if path in seen:
            continue
        load_dotenv(path, override=override)
        seen.add(path)
        logger.debug(f"Loaded environment from {path}")
