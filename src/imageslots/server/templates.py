"""Template management.

Provides the shared Jinja template environment used to render the
upload page.
"""

from __future__ import annotations

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, PackageLoader

__all__ = ["templates"]

templates = Jinja2Templates(
    env=Environment(
        loader=PackageLoader("imageslots", package_path="templates"),
        autoescape=True,
    ),
)
"""The template manager."""
