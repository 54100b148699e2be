# =============================================================================
# Export Models
# =============================================================================
# Defines the run-scoped configuration of a BigQuery → Firestore export and
# the summary reported back by the bulk-write sink.
# =============================================================================

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_DATABASE_ID


__all__ = ["FirestoreTarget", "ExportRunConfig", "BulkWriteSummary"]


class FirestoreTarget(BaseModel):
    """
    Default Firestore coordinates for one execution.

    Replaces a process-wide client options object: the document path builder
    receives this value explicitly instead of reading ambient state.

    Attributes:
        project_id: Project owning the database. None when it could not be
            resolved from configuration or credentials.
        default_database_id: Database used when a run names none.
    """

    project_id: Optional[str] = Field(None, description="Firestore project id")
    default_database_id: str = Field(
        DEFAULT_DATABASE_ID, description="Database used when a run names none"
    )

    model_config = ConfigDict(frozen=True)


class ExportRunConfig(BaseModel):
    """
    Immutable input of one export run.

    Attributes:
        query: Standard SQL query whose rows become documents
        firestore_collection: Top-level collection the run writes under
        run_id: Identifier namespacing this run's documents
        firestore_database_id: Target database (falls back to the default)
    """

    query: str = Field(..., description="Standard SQL query to export")
    firestore_collection: str = Field(..., description="Destination collection")
    run_id: str = Field(..., description="Run identifier used in document paths")
    firestore_database_id: Optional[str] = Field(
        None, description="Destination database (default database when empty)"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("query", "firestore_collection", "run_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


class BulkWriteSummary(BaseModel):
    """Outcome of handing a stream of writes to the Firestore bulk writer."""

    database_id: str
    submitted: int = 0
    succeeded: int = 0
    failed: int = 0
    failed_documents: list[str] = Field(
        default_factory=list,
        description="Relative paths of documents that were not written",
    )
