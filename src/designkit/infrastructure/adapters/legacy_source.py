"""Legacy data source with an interface that predates DataProvider."""

from typing import Any


class LegacyDataSource:
    """Old-style source: exposes ``fetch_legacy_payload`` instead of ``get_data``."""

    def __init__(self, payload: Any = "Données dans ancien format"):
        self._payload = payload

    def fetch_legacy_payload(self) -> Any:
        return self._payload
