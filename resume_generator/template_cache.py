# resume_generator/template_cache.py
"""
Startup decision on where Jinja keeps compiled templates.

The cache directory is created when missing. If it ends up writable its path
is used; otherwise caching is switched off and templates compile on the fly.
Nothing here may stop the application from starting.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from jinja2 import BytecodeCache, FileSystemBytecodeCache

logger = logging.getLogger("resume.templates")


@dataclass(frozen=True)
class TemplateCacheSetting:
    """Outcome of resolving the cache directory (``directory`` is None when off)."""

    directory: Optional[Path] = None

    @property
    def enabled(self) -> bool:
        return self.directory is not None

    def bytecode_cache(self) -> Optional[BytecodeCache]:
        if self.directory is None:
            return None
        return FileSystemBytecodeCache(str(self.directory))


# sentinel: compiled templates are not stored on disk
CACHE_DISABLED = TemplateCacheSetting()


def _is_writable_dir(path: Path) -> bool:
    return os.path.isdir(path) and os.access(path, os.W_OK)


def resolve_template_cache(path: Union[str, Path]) -> TemplateCacheSetting:
    """
    Ensure ``path`` exists and report whether it can hold the template cache.
    Creation errors are logged and ignored; writability alone decides.
    """
    cache_dir = Path(path)

    if not os.path.isdir(cache_dir):
        try:
            os.makedirs(cache_dir, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create template cache dir %s: %s", cache_dir, exc)

    if _is_writable_dir(cache_dir):
        logger.info("Template cache enabled at %s", cache_dir)
        return TemplateCacheSetting(directory=cache_dir)

    logger.info("Template cache disabled (%s is not writable)", cache_dir)
    return CACHE_DISABLED
