"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with fake or stubbed APIs.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_dimension_predicate.py: Dimension pattern matching
    - test_namespace_processor.py: Listing, filtering, classification
    - test_metric_transformer.py: Upload paths and aggregation
    - test_cloudwatch_client.py: CloudWatch requests via botocore Stubber
    - test_config_loader.py: Configuration loading/validation
"""
