"""Shared test fixtures and sample data for synthqa tests.

This package provides:
- Sample documents
- Scripted completion responses
"""

__all__ = [
    "sample_documents",
    "mock_completions",
]
