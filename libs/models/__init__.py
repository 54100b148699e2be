# =============================================================================
# Data Models Library
# =============================================================================
# Pydantic models and settings for the BigQuery → Firestore export pipeline.
# =============================================================================

"""
Data models for the export pipeline.

This library provides:
- FirestoreTarget: Default project/database coordinates
- ExportRunConfig: Run-scoped export configuration
- BulkWriteSummary: Result reported by the bulk-write sink
- Configuration models
"""

__version__ = "0.1.0"

# Export models
from .export import (
    BulkWriteSummary,
    ExportRunConfig,
    FirestoreTarget,
)

# Configuration models
from .config import (
    DEFAULT_DATABASE_ID,
    BigQuerySettings,
    FirestoreSettings,
)

__all__ = [
    # Export models
    "BulkWriteSummary",
    "ExportRunConfig",
    "FirestoreTarget",
    # Configuration models
    "DEFAULT_DATABASE_ID",
    "BigQuerySettings",
    "FirestoreSettings",
]
