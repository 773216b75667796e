"""
Fragment rendering with the Jinja2 templates in andamioscan_dashboard/templates.

Takes a view model and produces markup. Any failure to load or render a
template surfaces as RenderFailure; the server turns that into HTTP 500.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from andamioscan_dashboard.core.exceptions import RenderFailure

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
ASSETS_DIR = PACKAGE_DIR / "assets"


class FragmentRenderer:
    """Renders named templates from one directory into HTML strings/responses."""

    def __init__(self, directory: Path | str = TEMPLATES_DIR) -> None:
        self.directory = Path(directory)
        self._templates = Jinja2Templates(directory=str(self.directory))

    def render(self, template_name: str, **context: Any) -> str:
        try:
            template = self._templates.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise RenderFailure(template_name, e) from e

    def response(self, template_name: str, **context: Any) -> HTMLResponse:
        """Render eagerly so failures raise before any bytes are sent."""
        return HTMLResponse(content=self.render(template_name, **context))


@functools.lru_cache(maxsize=1)
def get_renderer() -> FragmentRenderer:
    """Dependency: process-wide renderer (the Jinja2 environment is immutable after load)."""
    return FragmentRenderer(TEMPLATES_DIR)
