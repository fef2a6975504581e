"""
Pipeline Package - One Collection Pass.

Components:
    - MetricsCollectionPipeline: collect candidates, fetch statistics,
      build upload records
    - collect_all_accounts: One pass per configured account and region
    - MetricsClientProtocol: What the pipeline needs from a metrics API

Design Principles:
    - All dependencies injected via constructor
    - No scheduling; the host decides when to run a pass
"""

from namespace_monitor.pipeline.collection_pipeline import (
    MetricsClientProtocol,
    MetricsCollectionPipeline,
    collect_all_accounts,
)

__all__ = [
    "MetricsClientProtocol",
    "MetricsCollectionPipeline",
    "collect_all_accounts",
]
