"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly.
Integration tests use the InMemoryMetricsClient to avoid external
dependencies while testing the full workflow.

Test Files:
    - test_collection_pipeline.py: Full collection pass and multi-account runs
"""
