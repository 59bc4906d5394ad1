"""Legacy catalogue source — pluggable reader for the pre-store product list."""

import os

_source_instance = None


def get_legacy_source():
    """Return the configured legacy source (singleton).

    Reads ``products.json`` by default. Configure with the LEGACY_SOURCE
    (``json`` or ``memory``) and LEGACY_PRODUCTS_PATH environment variables.
    """
    global _source_instance
    if _source_instance is None:
        adapter = os.environ.get("LEGACY_SOURCE", "json")
        if adapter == "json":
            from storefront.legacy.json_adapter import JsonFileSource

            _source_instance = JsonFileSource(os.environ.get("LEGACY_PRODUCTS_PATH", "products.json"))
        elif adapter == "memory":
            from storefront.legacy.memory_adapter import InMemorySource

            _source_instance = InMemorySource()
        else:
            raise ValueError(f"Unknown legacy source: {adapter}")
    return _source_instance


def reset_legacy_source():
    """Reset the legacy source singleton (useful for testing)."""
    global _source_instance
    _source_instance = None
