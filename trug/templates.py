"""Layout rendering for Trug.

This module hands a Page to Jinja2. Layouts live in the project's templates
directory and receive ``page``, ``config`` and ``assets`` as context, plus a few
helpers for emitting asset tags.

Key class:
- LayoutRenderer: Loads and renders the configured layout.
"""

from __future__ import annotations

import sys
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)
from markupsafe import Markup, escape

from .config import ProjectConfig
from .page import Page

__all__ = ["FALLBACK_LAYOUT", "LayoutRenderer", "RenderError", "asset_url"]

_ASSET_PREFIXES = {"css": "/css/", "js": "/js/"}

FALLBACK_LAYOUT = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ page.title }}</title>
{{ stylesheet_tags(page) }}
</head>
<body>
{{ page_content }}
{{ javascript_tags(page) }}
</body>
</html>
"""


class RenderError(Exception):
    """Error while rendering a layout.

    Attributes:
        layout: Name of the layout being rendered.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        layout: str,
        message: str,
        original_error: Exception | None = None,
    ):
        self.layout = layout
        self.message = message
        self.original_error = original_error
        super().__init__(f"{layout}: {message}")


def asset_url(kind: str, name: str) -> str:
    """Return the public URL of a discovered asset.

    Args:
        kind: Asset kind, "css" or "js".
        name: Base filename as returned by the asset lister.

    Returns:
        URL path like /css/app.css

    Raises:
        ValueError: If kind is not a known asset kind.
    """
    try:
        prefix = _ASSET_PREFIXES[kind]
    except KeyError:
        raise ValueError(f"Unknown asset kind: {kind}") from None
    return f"{prefix}{name}"


def stylesheet_tags(page: Page) -> Markup:
    """Render a <link> tag for every stylesheet of the page."""
    tags = [
        f'<link rel="stylesheet" href="{escape(asset_url("css", name))}">'
        for name in page.assets.stylesheets()
    ]
    return Markup("\n".join(tags))


def javascript_tags(page: Page) -> Markup:
    """Render a <script> tag for every script of the page."""
    tags = [
        f'<script src="{escape(asset_url("js", name))}"></script>'
        for name in page.assets.javascripts()
    ]
    return Markup("\n".join(tags))


class LayoutRenderer:
    """Renders the project layout with a Page as context.

    Attributes:
        config: Project configuration.
        env: Jinja2 environment loading from the templates directory.
    """

    def __init__(self, config: ProjectConfig):
        self.config = config
        self.env = Environment(
            loader=FileSystemLoader(str(config.templates_path)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
        )
        self.env.globals["asset_url"] = asset_url
        self.env.globals["stylesheet_tags"] = stylesheet_tags
        self.env.globals["javascript_tags"] = javascript_tags

    def render(self, page: Page | None = None, **extra: Any) -> str:
        """Render the configured layout.

        Args:
            page: Layout context; defaults to a Page for this renderer's config.
            **extra: Additional template variables (e.g. page_content).

        Returns:
            Rendered HTML string.

        Raises:
            RenderError: If the layout has a syntax error or fails to render.
        """
        page = page or Page(self.config)
        layout = self.config.layout
        context = {"page_content": "", **page.context(), **extra}
        try:
            template = self._resolve_layout_template(layout)
            return template.render(**context)
        except TemplateSyntaxError as exc:
            raise RenderError(
                layout,
                f"Template syntax error on line {exc.lineno}: {exc.message}",
                exc,
            ) from exc
        except Exception as exc:
            raise RenderError(layout, f"{type(exc).__name__}: {exc}", exc) from exc

    def _resolve_layout_template(self, layout: str) -> Template:
        candidates = [
            f"{layout}.html.jinja",
            f"{layout}.jinja",
            f"{layout}.html",
            layout,
        ]
        for name in candidates:
            try:
                return self.env.get_template(name)
            except TemplateNotFound:
                continue
        print(
            f"Layout '{layout}' not found in {self.config.templates_path}; using built-in layout.",
            file=sys.stderr,
        )
        return self.env.from_string(FALLBACK_LAYOUT)
