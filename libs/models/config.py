# =============================================================================
# Configuration Models Module
# =============================================================================
# Provides Pydantic Settings models for the Google Cloud services the export
# pipeline talks to:
# - BigQuerySettings: query engine (source of tabular records)
# - FirestoreSettings: document store (bulk-write destination)
# =============================================================================

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "BigQuerySettings",
    "FirestoreSettings",
    "DEFAULT_DATABASE_ID",
]

# Firestore's name for the database every project gets out of the box.
DEFAULT_DATABASE_ID = "(default)"


# =============================================================================
# BigQuery Settings (Query Engine)
# =============================================================================

class BigQuerySettings(BaseSettings):
    """
    Configuration for BigQuery (source warehouse).

    Maps environment variables:
    - BIGQUERY_PROJECT_ID / GOOGLE_CLOUD_PROJECT → project_id
    - BIGQUERY_LOCATION → location
    - BIGQUERY_PAGE_SIZE → page_size

    Attributes:
        project_id: Project billed for query jobs (default: ADC project)
        location: Location the query job runs in (default: inferred by BigQuery)
        page_size: Rows fetched per result page (default: client default)
    """

    project_id: str | None = Field(
        None,
        validation_alias=AliasChoices("BIGQUERY_PROJECT_ID", "GOOGLE_CLOUD_PROJECT"),
        description="Project billed for query jobs",
    )
    location: str | None = Field(None, validation_alias="BIGQUERY_LOCATION", description="Query job location")
    page_size: int | None = Field(None, validation_alias="BIGQUERY_PAGE_SIZE", description="Rows per result page")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )


# =============================================================================
# Firestore Settings (Document Store)
# =============================================================================

class FirestoreSettings(BaseSettings):
    """
    Configuration for Firestore (destination document store).

    These values are the process-wide defaults used when a run does not name
    its own target database.

    Maps environment variables:
    - FIRESTORE_PROJECT_ID / GOOGLE_CLOUD_PROJECT → project_id
    - FIRESTORE_DATABASE_ID → database_id

    Attributes:
        project_id: Project that owns the Firestore database (default: ADC project)
        database_id: Default database (default: "(default)")
    """

    project_id: str | None = Field(
        None,
        validation_alias=AliasChoices("FIRESTORE_PROJECT_ID", "GOOGLE_CLOUD_PROJECT"),
        description="Project that owns the Firestore database",
    )
    database_id: str = Field(
        DEFAULT_DATABASE_ID,
        validation_alias="FIRESTORE_DATABASE_ID",
        description="Default Firestore database",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )
