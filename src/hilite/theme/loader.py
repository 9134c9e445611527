"""Theme stylesheet discovery: bundled themes plus an optional directory."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from hilite.errors import ThemeNotFoundError

logger = logging.getLogger(__name__)

_PACKAGE = "hilite.theme"
_THEMES_DIR = "themes"
_SUFFIX = ".css"


class ThemeLoader:
    """Looks up theme CSS by name.

    Themes in *extra_dir* shadow bundled themes of the same name.
    """

    def __init__(self, extra_dir: str | Path | None = None) -> None:
        self._extra_dir = Path(extra_dir) if extra_dir else None

    def _bundled(self):
        return resources.files(_PACKAGE).joinpath(_THEMES_DIR)

    def list_themes(self) -> list[str]:
        """Return every available theme name, sorted."""
        names = {
            entry.name[: -len(_SUFFIX)]
            for entry in self._bundled().iterdir()
            if entry.name.endswith(_SUFFIX)
        }
        if self._extra_dir is not None and self._extra_dir.is_dir():
            names.update(path.stem for path in self._extra_dir.glob(f"*{_SUFFIX}"))
        return sorted(names)

    def load(self, name: str) -> str:
        """Return the CSS source of theme *name*."""
        if not name or "/" in name or "\\" in name or name.startswith("."):
            raise ThemeNotFoundError(name)

        filename = name + _SUFFIX
        if self._extra_dir is not None:
            path = self._extra_dir / filename
            if path.is_file():
                logger.debug("Loading theme %r from %s", name, path)
                return path.read_text(encoding="utf-8")

        resource = self._bundled().joinpath(filename)
        if not resource.is_file():
            raise ThemeNotFoundError(name)
        return resource.read_text(encoding="utf-8")
