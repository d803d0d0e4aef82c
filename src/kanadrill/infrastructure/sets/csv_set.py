"""
Two-column vocabulary sets backed by bundled CSV assets.

Each asset is UTF-8 text with one ``a,b`` record per line. Which column
becomes the prompt and which becomes the answer is decided per set.
"""

import logging
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from kanadrill.domain.constants import (
    ASSET_DIR_NAME,
    ASSET_PACKAGE,
    RECORD_COLUMNS,
    RECORD_SEPARATOR,
)
from kanadrill.domain.errors import AssetError
from kanadrill.domain.models import StudyItem
from kanadrill.domain.ports import StudySetLoader

logger = logging.getLogger(__name__)


def bundled_asset_dir() -> Traversable:
    """Return the read-only directory holding the bundled CSV files."""
    return files(ASSET_PACKAGE) / ASSET_DIR_NAME


def parse_records(
    text: str,
    source: str,
    front_column: int,
    back_column: int,
) -> list[StudyItem]:
    """
    Parse two-column records into study items.

    Blank lines are skipped. Lines that do not split into exactly two
    columns are logged and skipped; one bad line never aborts the set.

    Args:
        text: Full asset contents.
        source: Name used in warnings (usually the file name).
        front_column: Column index (0 or 1) that becomes ``front``.
        back_column: Column index (0 or 1) that becomes ``back``.
    """
    items: list[StudyItem] = []

    for line in text.splitlines():
        if not line.strip():
            continue

        parts = line.split(RECORD_SEPARATOR)
        if len(parts) != RECORD_COLUMNS:
            logger.warning(f"Skipping malformed line in {source}: {line}")
            continue

        items.append(
            StudyItem(
                front=parts[front_column].strip(),
                back=parts[back_column].strip(),
            )
        )

    return items


class CsvStudySet(StudySetLoader):
    """
    Base loader for a bundled two-column CSV set.

    Subclasses pin the set name, the asset file and the column mapping.
    """

    set_name: str = ""
    asset_name: str = ""
    front_column: int = 0
    back_column: int = 1

    def __init__(self, asset_dir: Traversable | Path | None = None):
        self.asset_dir = asset_dir if asset_dir is not None else bundled_asset_dir()

    @property
    def name(self) -> str:
        return self.set_name

    def read_asset(self) -> str:
        """Read the asset as UTF-8, raising AssetError if it is unusable."""
        asset = self.asset_dir / self.asset_name
        if not asset.is_file():
            raise AssetError(f"{self.asset_name} not found in assets directory")

        try:
            return asset.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise AssetError(f"Failed to read {self.asset_name} as UTF-8: {e}") from e

    def load(self) -> list[StudyItem]:
        items = parse_records(
            self.read_asset(),
            source=self.asset_name,
            front_column=self.front_column,
            back_column=self.back_column,
        )
        logger.debug(f"Loaded {len(items)} items from {self.asset_name}")
        return items
