"""Dagster Jobs - Executable Workflows."""

from .bigquery_to_firestore_job import bigquery_to_firestore_job

__all__ = ["bigquery_to_firestore_job"]
