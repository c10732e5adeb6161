# resume_generator/views.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

from resume_generator.template_cache import TemplateCacheSetting


def create_environment(
    templates_dir: Union[str, Path], cache: TemplateCacheSetting, debug: bool = True
) -> Environment:
    """Jinja environment reading from ``templates_dir``; recompiles on source change."""
    extensions = ["jinja2.ext.debug"] if debug else []
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        bytecode_cache=cache.bytecode_cache(),
        auto_reload=True,
        autoescape=select_autoescape(["html", "xml"]),
        extensions=extensions,
    )


def create_templates(
    templates_dir: Union[str, Path], cache: TemplateCacheSetting, debug: bool = True
) -> Jinja2Templates:
    # Jinja2Templates wraps our environment and adds the url_for global
    return Jinja2Templates(env=create_environment(templates_dir, cache, debug=debug))


def render(templates: Jinja2Templates, name: str, context: Mapping[str, Any]) -> str:
    """Render a named template to a string."""
    return templates.get_template(name).render(dict(context))
