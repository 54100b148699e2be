"""Dagster Ops - Reusable Computation Units."""

from .export_ops import (
    ExportJobConfig,
    export_query_to_firestore,
    resolve_export_plan,
)

__all__ = [
    "ExportJobConfig",
    "export_query_to_firestore",
    "resolve_export_plan",
]
