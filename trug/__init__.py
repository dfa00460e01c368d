"""Trug static site scaffold.

This package provides the layout context that a Jinja2 layout is rendered with:
the project configuration plus the stylesheets and scripts found under ``public/``.

Pre-rendered content (such as a slideshow page) lives in ``public/`` and is served
as-is by any static file server; Trug never serves files itself.

The main entry point is the CLI module, which provides commands for scaffolding
new projects, listing assets and rendering the layout.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
