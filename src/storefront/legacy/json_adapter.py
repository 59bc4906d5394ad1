"""Reads the legacy catalogue from a ``products.json`` file."""

import json
from pathlib import Path

from storefront.exceptions import LegacySourceError
from storefront.legacy.port import LegacySource


class JsonFileSource(LegacySource):
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load_products(self) -> list[dict]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise LegacySourceError(f"Could not read {self.path}: {exc}") from exc

        if not isinstance(data, list) or not all(isinstance(record, dict) for record in data):
            raise LegacySourceError(f"{self.path} must contain a JSON array of product records")
        return data
