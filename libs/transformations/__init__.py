# =============================================================================
# Transformations Library
# =============================================================================
# Row → document transformation for the BigQuery → Firestore export.
# =============================================================================

"""
Transformations library for the export pipeline.

This library provides:
- row_to_fields: Tabular record → Firestore field map (string coercion)
- DocumentPathBuilder: Run-namespaced document names
- DocumentWrite / RowTransformer: Per-row write request assembly
"""

from .mapper import NULL_PLACEHOLDER, coerce_value, row_to_fields
from .paths import (
    ConfigurationError,
    DocumentName,
    DocumentPathBuilder,
    build_document_path,
    new_document_id,
    resolve_database_id,
    split_document_name,
)
from .writes import DocumentWrite, RowTransformer, build_write

__all__ = [
    "NULL_PLACEHOLDER",
    "coerce_value",
    "row_to_fields",
    "ConfigurationError",
    "DocumentName",
    "DocumentPathBuilder",
    "build_document_path",
    "new_document_id",
    "resolve_database_id",
    "split_document_name",
    "DocumentWrite",
    "RowTransformer",
    "build_write",
]
