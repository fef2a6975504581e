"""
Metric Stats Transformer.

Turns fetched statistics into path-named upload records. A path is:

    [prefix|]namespace|<display name>|<value>|...|metric name

with one display name/value pair per dimension of the metric, in the
order the API returned them. Dimensions without a configured display
name keep their raw key so that distinct series never share a path.

Every segment except the prefix is escaped: a backslash becomes "\\\\"
and the delimiter becomes "\\|", so a value containing "|" cannot
forge extra segments.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from namespace_monitor.domain.entities import (
    NamespaceMetricStatistics,
    RawMetric,
    UploadMetric,
)
from namespace_monitor.domain.value_objects import DisplayNameDict

logger = logging.getLogger(__name__)

PATH_DELIMITER = "|"


class MetricStatsTransformer:
    """Builds UploadMetric records from one cycle's statistics."""

    def __init__(
        self,
        display_names: Mapping[str, str],
        metric_prefix: Optional[str] = None,
        delimiter: str = PATH_DELIMITER,
    ) -> None:
        """
        Args:
            display_names: Dimension name -> display name
            metric_prefix: Optional leading path segments
            delimiter: Path segment separator
        """
        self._display_names: DisplayNameDict = dict(display_names)
        self._prefix = (metric_prefix or "").strip(delimiter)
        self._delimiter = delimiter

    def transform(self, statistics: NamespaceMetricStatistics) -> List[UploadMetric]:
        """One UploadMetric per statistic that has a value."""
        upload_metrics: List[UploadMetric] = []
        skipped = 0

        for statistic in statistics.metric_statistics:
            if statistic.value is None:
                skipped += 1
                continue
            upload_metrics.append(
                UploadMetric(
                    metric_path=self.build_metric_path(
                        statistics.namespace, statistic.metric.raw
                    ),
                    value=statistic.value,
                    aggregation_type=statistic.metric.statistic_type.aggregation_type,
                )
            )

        if skipped:
            logger.debug(f"{statistics.namespace}: {skipped} metrics had no datapoints")
        return upload_metrics

    def build_metric_path(self, namespace: str, metric: RawMetric) -> str:
        segments: List[str] = [namespace]
        for dimension in metric.dimensions:
            segments.append(self._display_names.get(dimension.name, dimension.name))
            segments.append(dimension.value)
        segments.append(metric.name)

        escaped = [self._escape(segment) for segment in segments]
        if self._prefix:
            escaped.insert(0, self._prefix)
        return self._delimiter.join(escaped)

    def _escape(self, segment: str) -> str:
        return segment.replace("\\", "\\\\").replace(
            self._delimiter, "\\" + self._delimiter
        )
