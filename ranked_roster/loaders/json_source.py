"""
JSON roster source.

Reads a JSON array of {"name": ..., "score": ...} objects. The file is only
read; the board is never written back.
"""

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from typing_extensions import TypedDict, override

from ..exceptions import ValidationError
from ..interfaces import RosterSource
from ..logging_config import get_logger

# Module-level logger
logger = get_logger("json_source")


class SeedRecord(TypedDict):
    """Type definition for one seed row."""

    name: str
    score: int


SEED_ADAPTER = TypeAdapter(list[SeedRecord])


class JSONRosterSource(RosterSource):
    """
    Roster source backed by a JSON file.

    Structure is validated with pydantic; names are stripped and must be
    non-empty. Rows are returned in file order, which becomes admission order.
    """

    def __init__(self, path: Path):
        """
        Initialize JSON roster source.

        Args:
            path: Path to the JSON seed file
        """
        self.path: Path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Roster file does not exist: {self.path}")
        if not self.path.is_file():
            raise ValidationError(f"Roster path is not a file: {self.path}")

    @override
    def list_seeds(self) -> Iterable[tuple[str, int]]:
        """Load and validate all seed rows."""
        logger.info(f"Loading roster seed from {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Roster file {self.path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise ValidationError(f"Roster file {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ValidationError(f"Roster file {self.path} cannot be read: {e}") from e

        try:
            records = SEED_ADAPTER.validate_python(raw, strict=True)
        except PydanticValidationError as e:
            raise ValidationError(f"Roster file {self.path} has invalid rows: {e}") from e

        seeds: list[tuple[str, int]] = []
        for index, record in enumerate(records):
            name = record["name"].strip()
            if not name:
                raise ValidationError(f"Roster file {self.path}: row {index} has an empty name")
            seeds.append((name, record["score"]))

        logger.info(f"Loaded {len(seeds)} seed rows from {self.path}")
        return seeds
