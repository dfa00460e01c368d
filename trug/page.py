"""Layout context for Trug.

A Page is what the layout template sees. Everything a layout needs from the
project (configuration, stylesheet and script names) is reachable from it.
"""

from __future__ import annotations

from typing import Any

from .assets import AssetLister
from .config import ProjectConfig


class Page:
    """Main layout context injected into the layout template.

    Attributes:
        config: Project configuration; borrowed, never modified.
    """

    def __init__(self, config: ProjectConfig):
        self.config = config

    @property
    def assets(self) -> AssetLister:
        """Asset lister for the project root, created fresh on each access."""
        return AssetLister(self.config.root)

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def stylesheets(self) -> list[str]:
        return self.assets.stylesheets()

    @property
    def javascripts(self) -> list[str]:
        return self.assets.javascripts()

    def context(self) -> dict[str, Any]:
        """Return the variables handed to the layout template.

        Returns:
            Dictionary with ``page``, ``config`` and ``assets`` entries.
        """
        return {
            "page": self,
            "config": self.config,
            "assets": self.assets,
        }

    def __repr__(self) -> str:
        return f"Page(root={str(self.config.root)!r})"
