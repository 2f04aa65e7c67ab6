"""Static dataset catalog."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pyskope.exceptions import SkopeNotFoundError, SkopeValidationError
from pyskope.models.metadata import DatasetMetadata

_logger = logging.getLogger(__name__)


class DatasetCatalog:
    """Ordered, read-only collection of :class:`DatasetMetadata` records.

    Lookups match ``id`` exactly.  When the catalog contains the same id
    twice, the first record in catalog order wins.
    """

    def __init__(self, records: Iterable[DatasetMetadata] = ()) -> None:
        self._records: tuple[DatasetMetadata, ...] = tuple(records)
        self._by_id: dict[str, DatasetMetadata] = {}
        for record in self._records:
            self._by_id.setdefault(record.id, record)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> DatasetCatalog:
        """Parse raw catalog dicts (camelCase keys)."""
        parsed: list[DatasetMetadata] = []
        for index, record in enumerate(records):
            try:
                parsed.append(DatasetMetadata.model_validate(dict(record)))
            except ValidationError as exc:
                raise SkopeValidationError(f"catalog record {index} is invalid: {exc}") from exc
        return cls(parsed)

    @classmethod
    def from_json_file(cls, path: str | Path) -> DatasetCatalog:
        """Load a catalog stored as a JSON array of records."""
        catalog_path = Path(path)
        try:
            data = json.loads(catalog_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SkopeValidationError(f"catalog file {catalog_path} is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise SkopeValidationError(f"catalog file {catalog_path} must contain a JSON array")
        catalog = cls.from_records(data)
        _logger.debug("Loaded %d dataset records from %s", len(catalog), catalog_path)
        return catalog

    def get(self, dataset_id: str) -> DatasetMetadata | None:
        return self._by_id.get(dataset_id)

    def require(self, dataset_id: str) -> DatasetMetadata:
        """Return the record for *dataset_id* or raise :class:`SkopeNotFoundError`."""
        record = self._by_id.get(dataset_id)
        if record is None:
            raise SkopeNotFoundError(f"no dataset with id {dataset_id!r}", dataset_id=dataset_id)
        return record

    def ids(self) -> list[str]:
        return [record.id for record in self._records]

    def __contains__(self, dataset_id: object) -> bool:
        return dataset_id in self._by_id

    def __iter__(self) -> Iterator[DatasetMetadata]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
