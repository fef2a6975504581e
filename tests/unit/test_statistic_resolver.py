"""
Unit Tests for StatisticTypeResolver and StatisticType.

Test Aspects Covered:
    ✅ Business Logic: Exact-name lookup, statistic parsing
    ✅ Error Handling: Unconfigured names, unknown statistics
"""

from __future__ import annotations

import pytest

from namespace_monitor.domain.entities import (
    AggregationType,
    IncludeMetric,
    StatisticType,
)
from namespace_monitor.filters.statistic_resolver import (
    StatisticTypeResolver,
    UnconfiguredMetricError,
    resolve_statistic_type,
)


class TestStatisticTypeResolver:
    """Test cases for the resolver."""

    def test_resolves_configured_metric(self, include_metric: IncludeMetric) -> None:
        """
        SCENARIO: Metric name matches an include metric
        EXPECTED: Its statistic type, spelled "Average" by the API
        """
        # Arrange
        resolver = StatisticTypeResolver([include_metric])

        # Act
        stat_type = resolver.resolve("testMetric")

        # Assert
        assert stat_type == StatisticType.AVE
        assert stat_type.type_name == "Average"

    def test_unconfigured_metric_raises(self, include_metric: IncludeMetric) -> None:
        """
        SCENARIO: Metric name not configured
        EXPECTED: UnconfiguredMetricError carrying the name
        """
        resolver = StatisticTypeResolver([include_metric])
        with pytest.raises(UnconfiguredMetricError) as exc_info:
            resolver.resolve("otherMetric")
        assert exc_info.value.metric_name == "otherMetric"

    def test_lookup_is_case_sensitive(self, include_metric: IncludeMetric) -> None:
        """
        SCENARIO: Name differs only in case
        EXPECTED: Not found
        """
        resolver = StatisticTypeResolver([include_metric])
        assert resolver.find_include_metric("TestMetric") is None

    def test_first_duplicate_wins(self) -> None:
        """
        SCENARIO: Same name configured twice with different statistics
        EXPECTED: The first entry is used
        """
        resolver = StatisticTypeResolver(
            [
                IncludeMetric(name="m", stat_type="max"),
                IncludeMetric(name="m", stat_type="min"),
            ]
        )
        assert resolver.resolve("m") == StatisticType.MAX
        assert len(resolver) == 1

    def test_one_off_helper(self) -> None:
        """
        SCENARIO: Lookup without building a resolver
        EXPECTED: Same result as the resolver
        """
        include_metrics = [IncludeMetric(name="NetworkIn", stat_type="sum")]
        assert resolve_statistic_type("NetworkIn", include_metrics) == StatisticType.SUM
        with pytest.raises(UnconfiguredMetricError):
            resolve_statistic_type("NetworkOut", include_metrics)


class TestStatisticType:
    """Test cases for statistic parsing and mapping."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("ave", StatisticType.AVE),
            ("Average", StatisticType.AVE),
            ("MAX", StatisticType.MAX),
            ("minimum", StatisticType.MIN),
            ("sum", StatisticType.SUM),
            ("SampleCount", StatisticType.SAMPLE_COUNT),
            (" samplecount ", StatisticType.SAMPLE_COUNT),
        ],
    )
    def test_parse(self, raw: str, expected: StatisticType) -> None:
        """
        SCENARIO: Short codes and API names in any case
        EXPECTED: Parsed to the matching statistic
        """
        assert StatisticType.parse(raw) == expected

    def test_parse_unknown(self) -> None:
        """
        SCENARIO: Unknown statistic
        EXPECTED: ValueError listing the accepted codes
        """
        with pytest.raises(ValueError, match="samplecount"):
            StatisticType.parse("p99")

    def test_aggregation_mapping(self, stat_types) -> None:
        """
        SCENARIO: Every statistic type
        EXPECTED: Average -> AVERAGE, sums -> SUM, extremes -> OBSERVATION
        """
        mapping = {s: s.aggregation_type for s in stat_types}
        assert mapping == {
            StatisticType.AVE: AggregationType.AVERAGE,
            StatisticType.SUM: AggregationType.SUM,
            StatisticType.SAMPLE_COUNT: AggregationType.SUM,
            StatisticType.MIN: AggregationType.OBSERVATION,
            StatisticType.MAX: AggregationType.OBSERVATION,
        }
