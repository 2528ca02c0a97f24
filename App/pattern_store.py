"""Named pattern storage on disk.

Each pattern is one JSON file (Pattern.to_dict() output) in the store
directory, named after the pattern.
"""

import json
import logging
import re
from pathlib import Path
from typing import List

from embroidery.catalog import ThreadCatalog
from embroidery.color_space import to_lab
from embroidery.palette import compile_manifest
from errors import ConfigurationError, MissingValueError, PatternExistsError
from models import EmbroideryGrid, Pattern, PatternConfig, ThreadColor

logger = logging.getLogger(__name__)

# Names become file names, so keep them to a portable character set
_NAME_PATTERN = re.compile(r"^[\w][\w .-]*$")


class PatternStore:
    """Saves and loads patterns under user-chosen names."""

    SUFFIX = ".json"

    def __init__(self, directory: "str | Path"):
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        name = (name or "").strip()
        if not name:
            raise MissingValueError("name")
        if not _NAME_PATTERN.match(name):
            raise ConfigurationError(
                "name", "Use letters, digits, spaces, dots, dashes or underscores"
            )
        return self.directory / f"{name}{self.SUFFIX}"

    def save(self, name: str, pattern: Pattern) -> Path:
        """Store a pattern under a new name.

        Raises:
            PatternExistsError: If the name is already taken
        """
        path = self._path(name)
        if path.exists():
            raise PatternExistsError("Pattern with such name already exists")

        self.directory.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(pattern.to_dict(), f)
        logger.info("Saved pattern '%s' to %s", name.strip(), path)
        return path

    def names(self) -> List[str]:
        """Names of all stored patterns, sorted."""
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{self.SUFFIX}"))

    def load(self, name: str, catalog: ThreadCatalog) -> Pattern:
        """Rebuild a stored pattern.

        Threads are looked up in the catalog by name so their Lab values are
        current; the manifest is recompiled from the grid.

        Raises:
            KeyError: If no pattern has this name
        """
        path = self._path(name)
        if not path.exists():
            raise KeyError(name)

        with open(path, "r") as f:
            data = json.load(f)

        grid = EmbroideryGrid.from_rows(data["embroidery"])
        config = PatternConfig(**data["config"])
        threads = [self._thread(entry["color"], catalog) for entry in data["palette"]]

        return Pattern(
            grid=grid,
            manifest=compile_manifest(grid, threads),
            config=config,
            filename=data.get("filename", "pattern.png"),
        )

    @staticmethod
    def _thread(color: dict, catalog: ThreadCatalog) -> ThreadColor:
        try:
            thread = catalog.get(color["name"])
        except KeyError:
            thread = None
        rgb = tuple(color["rgb"])
        if thread is not None and thread.rgb == rgb:
            return thread
        # Thread no longer in the catalog; keep the stored color
        logger.warning("Thread %s not found in catalog", color["name"])
        return ThreadColor(name=color["name"], rgb=rgb, lab=to_lab(rgb))
