"""Asset discovery for Trug.

Stylesheets and scripts live under the project's ``public/`` directory:

    {root}/public/css/**/*.css
    {root}/public/js/**/*.js

The lister only reports base filenames; the layout decides how to turn them into
``<link>`` and ``<script>`` tags. Nothing is cached, so every call reflects the
current state of the filesystem.

Key components:
- AssetLister: Lists stylesheets and scripts for a project root.
- AssetList: Both lists captured together.
- list_assets: Single directory listing used by the lister.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PUBLIC_DIR = "public"
STYLESHEET_DIR = "css"
STYLESHEET_EXTENSION = ".css"
JAVASCRIPT_DIR = "js"
JAVASCRIPT_EXTENSION = ".js"


def list_assets(root: Path | str, subdir: str, extension: str) -> list[str]:
    """Return base filenames of files matching ``extension`` under ``root/subdir``.

    The search is recursive. Results are sorted by path relative to the asset
    directory so the output does not depend on filesystem enumeration order.
    A missing or unreadable directory yields an empty list.

    Args:
        root: Directory containing the asset subdirectories (usually public/).
        subdir: Subdirectory to search (e.g., "css").
        extension: Extension including the dot (e.g., ".css").

    Returns:
        List of base filenames.
    """
    base = Path(root) / subdir
    try:
        if not base.is_dir():
            return []
        matches = sorted(
            path.relative_to(base)
            for path in base.rglob(f"*{extension}")
            if path.is_file()
        )
    except OSError:
        return []
    return [path.name for path in matches]


@dataclass
class AssetList:
    """Stylesheet and script filenames discovered for a project.

    Attributes:
        stylesheets: Base filenames of CSS files.
        javascripts: Base filenames of JavaScript files.
    """

    stylesheets: list[str] = field(default_factory=list)
    javascripts: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "stylesheets": list(self.stylesheets),
            "javascripts": list(self.javascripts),
        }


class AssetLister:
    """Lists the stylesheets and scripts of a project.

    Attributes:
        root: Public directory that holds the css/ and js/ folders.
    """

    def __init__(self, project_root: Path | str):
        """Initialize the lister.

        Args:
            project_root: Root directory of the Trug project.
        """
        self.root = Path(project_root) / PUBLIC_DIR

    def stylesheets(self) -> list[str]:
        """Return base filenames of all .css files under public/css/."""
        return list_assets(self.root, STYLESHEET_DIR, STYLESHEET_EXTENSION)

    def javascripts(self) -> list[str]:
        """Return base filenames of all .js files under public/js/."""
        return list_assets(self.root, JAVASCRIPT_DIR, JAVASCRIPT_EXTENSION)

    def collect(self) -> AssetList:
        """Return both lists in a single AssetList."""
        return AssetList(stylesheets=self.stylesheets(), javascripts=self.javascripts())

    def __repr__(self) -> str:
        return f"AssetLister(root={str(self.root)!r})"
