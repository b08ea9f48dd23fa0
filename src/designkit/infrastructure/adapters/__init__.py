"""Adapters bridging incompatible interfaces to domain ports."""

from .legacy_report_adapter import LegacyReportAdapter
from .legacy_source import LegacyDataSource

__all__ = ["LegacyDataSource", "LegacyReportAdapter"]
