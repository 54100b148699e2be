"""Dagster Resources - External Service Connections."""

from .bigquery_resource import BigQueryResource
from .firestore_resource import FirestoreResource

__all__ = [
    "BigQueryResource",
    "FirestoreResource",
]
