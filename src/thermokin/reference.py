"""Loading of the static reference data file."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from thermokin.errors import InvalidInput
from thermokin.substances import SubstanceTable

logger = logging.getLogger(__name__)

DATA_PACKAGE = "thermokin.data"
DATA_FILE = "substances.json"


def _read_text(path: str | Path | None) -> tuple[str, str]:
    if path is None:
        source = resources.files(DATA_PACKAGE).joinpath(DATA_FILE)
        return source.read_text(encoding="utf-8"), f"{DATA_PACKAGE}/{DATA_FILE}"
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except OSError as exc:
        raise InvalidInput(f"Cannot read reference data {path}: {exc}") from exc


def load_reference_table(path: str | Path | None = None) -> SubstanceTable:
    """Load a reference table from ``path`` or from the bundled data file."""
    text, source = _read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"Reference data {source} is not valid JSON: {exc}") from exc
    table = SubstanceTable.from_mapping(data)
    logger.debug("Loaded %d substances from %s", len(table), source)
    return table


@lru_cache(maxsize=None)
def default_table() -> SubstanceTable:
    """The bundled table, loaded once per process."""
    return load_reference_table()
