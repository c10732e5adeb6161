# resume_generator/container.py
"""
Process-wide dependency container.

Built once at startup and handed to the router factories. The template engine
is created on first use and then shared read-only by every request.
"""

from __future__ import annotations

from datetime import datetime
from functools import cached_property
from typing import Callable

from fastapi.templating import Jinja2Templates

from resume_generator.config import Settings
from resume_generator.template_cache import TemplateCacheSetting, resolve_template_cache
from resume_generator.views import create_templates

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local time with its UTC offset."""
    return datetime.now().astimezone()


class Container:
    def __init__(self, settings: Settings, clock: Clock = local_now) -> None:
        self.settings = settings
        self.clock = clock

    @cached_property
    def template_cache(self) -> TemplateCacheSetting:
        return resolve_template_cache(self.settings.cache_dir)

    @cached_property
    def templates(self) -> Jinja2Templates:
        return create_templates(
            self.settings.templates_dir,
            self.template_cache,
            debug=self.settings.display_error_details,
        )
