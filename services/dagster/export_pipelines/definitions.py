"""Dagster Definitions - Repository Configuration.

Defines jobs and resources for the BigQuery → Firestore export pipeline.
"""

from dagster import Definitions

from libs.models import BigQuerySettings, FirestoreSettings

from .jobs import bigquery_to_firestore_job
from .resources import BigQueryResource, FirestoreResource


# =============================================================================
# Resources
# =============================================================================

bigquery_settings = BigQuerySettings()
firestore_settings = FirestoreSettings()

bigquery_resource = BigQueryResource(
    project_id=bigquery_settings.project_id,
    location=bigquery_settings.location,
    page_size=bigquery_settings.page_size,
)
firestore_resource = FirestoreResource(
    project_id=firestore_settings.project_id,
    database_id=firestore_settings.database_id,
)


# =============================================================================
# Definitions
# =============================================================================

defs = Definitions(
    jobs=[bigquery_to_firestore_job],
    resources={
        "bigquery": bigquery_resource,
        "firestore": firestore_resource,
    },
    schedules=[],
    sensors=[],
)
