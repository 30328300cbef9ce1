# backend/economy/reference_data.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from .schemas.reference import ItemType, Rarity

logger = logging.getLogger(__name__)

RARITIES_FILE = "rarities.json"
TYPES_FILE = "types.json"


class ReferenceData:
    """
    The item rarity and type tables. Built once at startup and shared read-only
    by every request (see economy.main.lifespan).
    """

    def __init__(self, rarities: Sequence[Rarity], types: Sequence[ItemType]):
        self._rarities: Dict[int, Rarity] = {r.id: r for r in rarities}
        self._types: Dict[int, ItemType] = {t.id: t for t in types}

    @property
    def rarities(self) -> List[Rarity]:
        return list(self._rarities.values())

    @property
    def types(self) -> List[ItemType]:
        return list(self._types.values())

    def get_rarity(self, rarity_id: Optional[int]) -> Optional[Rarity]:
        if rarity_id is None:
            return None
        return self._rarities.get(rarity_id)

    def get_type(self, type_id: Optional[int]) -> Optional[ItemType]:
        if type_id is None:
            return None
        return self._types.get(type_id)

    def get_rarity_by_name(self, name: str) -> Optional[Rarity]:
        return next((r for r in self._rarities.values() if r.name == name), None)

    def get_type_by_name(self, name: str) -> Optional[ItemType]:
        return next((t for t in self._types.values() if t.name == name), None)

    def __repr__(self) -> str:
        return f"<ReferenceData(rarities={len(self._rarities)}, types={len(self._types)})>"


def _load_seed_data(filepath: Path) -> List[Dict[str, Any]]:
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Seed file not found: {filepath}")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Could not decode JSON from {filepath}: {e}")
        return []


def _parse_entries(model, entries: List[Dict[str, Any]], source: Path) -> list:
    parsed = []
    for entry in entries:
        try:
            parsed.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping invalid entry in {source.name}: {entry} ({e.error_count()} errors)")
    return parsed


def load_reference_data(directory: Union[str, Path]) -> ReferenceData:
    directory = Path(directory)
    logger.info(f"Loading reference data from {directory}...")

    rarities_path = directory / RARITIES_FILE
    types_path = directory / TYPES_FILE
    rarities = _parse_entries(Rarity, _load_seed_data(rarities_path), rarities_path)
    types = _parse_entries(ItemType, _load_seed_data(types_path), types_path)

    if not rarities or not types:
        logger.warning("Reference data is incomplete; item creation will reject every rarity/type id.")

    reference = ReferenceData(rarities, types)
    logger.info(f"Reference data loaded: {len(rarities)} rarities, {len(types)} types.")
    return reference
