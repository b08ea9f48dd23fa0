"""Tests for the legacy report adapter."""

from unittest.mock import Mock

import pytest

from designkit.domain.ports import DataProvider
from designkit.infrastructure.adapters import LegacyDataSource, LegacyReportAdapter


def test_adapter_returns_legacy_value_unchanged():
    # Arrange
    adapter = LegacyReportAdapter(LegacyDataSource("Données dans ancien format"))

    # Act
    result = adapter.get_data()

    # Assert
    assert result == "Données dans ancien format"


def test_adapter_implements_target_interface():
    adapter = LegacyReportAdapter(LegacyDataSource())

    assert isinstance(adapter, DataProvider)
    assert not isinstance(adapter, LegacyDataSource)


def test_each_call_forwards_exactly_once():
    # Arrange
    source = Mock(spec=LegacyDataSource)
    source.fetch_legacy_payload.return_value = {"rows": [1, 2]}
    adapter = LegacyReportAdapter(source)

    # Act
    first = adapter.get_data()
    second = adapter.get_data()

    # Assert
    assert first is second
    assert source.fetch_legacy_payload.call_count == 2


def test_source_failure_propagates_unchanged():
    # Arrange
    error = ConnectionError("legacy system offline")
    source = Mock(spec=LegacyDataSource)
    source.fetch_legacy_payload.side_effect = error
    adapter = LegacyReportAdapter(source)

    # Act / Assert
    with pytest.raises(ConnectionError) as exc_info:
        adapter.get_data()
    assert exc_info.value is error
