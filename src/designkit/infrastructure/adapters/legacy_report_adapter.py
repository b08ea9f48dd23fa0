"""Legacy Report Adapter implementing DataProvider.

This adapter implements the DataProvider interface on top of a
LegacyDataSource, bridging code written against the current interface and
a source that only speaks the old one.

Architecture:
- Implements domain DataProvider interface
- Holds the wrapped LegacyDataSource by composition
- Translates call shape only; values and errors pass through unchanged
"""
from typing import Any

from designkit.domain.ports.data_provider_port import DataProvider
from designkit.infrastructure.adapters.legacy_source import LegacyDataSource


class LegacyReportAdapter(DataProvider):
    """Adapter exposing a LegacyDataSource as a DataProvider."""

    def __init__(self, source: LegacyDataSource):
        """Initialize with the source to adapt.

        Args:
            source: Legacy data source instance
        """
        self._source = source

    @property
    def source(self) -> LegacyDataSource:
        """The wrapped legacy source."""
        return self._source

    def get_data(self) -> Any:
        """Return the legacy payload through the current interface."""
        return self._source.fetch_legacy_payload()
