# =============================================================================
# Firestore Resource - Bulk-Write Sink
# =============================================================================
# Hands document writes to the Firestore BulkWriter, which owns batching,
# ramp-up throttling and retry/backoff against the RPC quota.
# =============================================================================

import logging
import threading
from typing import Iterable, Optional

import google.auth
from dagster import ConfigurableResource
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import firestore
from google.cloud.firestore_v1.bulk_writer import BulkWriteFailure, BulkWriterOptions
from pydantic import Field

from libs.models import DEFAULT_DATABASE_ID, BulkWriteSummary, FirestoreTarget
from libs.transformations import DocumentWrite, split_document_name

__all__ = ["FirestoreResource"]

logger = logging.getLogger(__name__)


class _WriteTally:
    """Counts write outcomes reported from BulkWriter worker threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self.succeeded = 0
        self.failed_documents: list[str] = []

    def record_success(self) -> None:
        with self._lock:
            self.succeeded += 1

    def record_failure(self, path: str) -> None:
        with self._lock:
            self.failed_documents.append(path)


class FirestoreResource(ConfigurableResource):
    """
    Dagster resource for writing documents to Firestore.

    Provides:
    - Resolution of the default project/database (FirestoreTarget)
    - Bulk replace of documents through a BulkWriter

    Configuration matches FirestoreSettings from libs.models.config.

    Attributes:
        project_id: Project owning the database (default: ADC project)
        database_id: Default database (default: "(default)")
        initial_ops_per_second: BulkWriter starting throughput
        max_ops_per_second: BulkWriter throughput ceiling
        max_attempts: Attempts per write before it is reported as failed
    """

    project_id: Optional[str] = Field(None, description="Project owning the database")
    database_id: str = Field(DEFAULT_DATABASE_ID, description="Default Firestore database")
    initial_ops_per_second: int = Field(500, description="BulkWriter starting ops/s")
    max_ops_per_second: int = Field(10000, description="BulkWriter ops/s ceiling")
    max_attempts: int = Field(15, description="Attempts per write before giving up")

    def resolve_project_id(self) -> Optional[str]:
        """
        Return the configured project, falling back to the project of the
        application default credentials. None when neither is available.
        """
        if self.project_id:
            return self.project_id
        try:
            _, project = google.auth.default()
        except DefaultCredentialsError as e:
            logger.warning(f"No application default credentials: {e}")
            return None
        return project

    def default_target(self) -> FirestoreTarget:
        return FirestoreTarget(
            project_id=self.resolve_project_id(),
            default_database_id=self.database_id,
        )

    def get_client(self, project_id: str, database_id: str) -> firestore.Client:
        """
        Create a Firestore client for one database.

        Args:
            project_id: Project owning the database
            database_id: Database to write to

        Returns:
            Configured Firestore client
        """
        return firestore.Client(project=project_id, database=database_id)

    def bulk_write(
        self,
        writes: Iterable[DocumentWrite],
        *,
        project_id: str,
        database_id: str,
    ) -> BulkWriteSummary:
        """
        Replace every document in ``writes`` and wait for completion.

        Writes are consumed lazily and enqueued on a BulkWriter. A write that
        still fails after ``max_attempts`` is logged and reported in the
        summary; this method does not raise for per-document failures.

        Args:
            writes: Document writes targeting ``project_id``/``database_id``
            project_id: Project of the target database
            database_id: Target database

        Returns:
            BulkWriteSummary with submitted/succeeded/failed counts

        Raises:
            ValueError: If a write targets a different project or database
        """
        client = self.get_client(project_id, database_id)
        bulk_writer = client.bulk_writer(
            options=BulkWriterOptions(
                initial_ops_per_second=self.initial_ops_per_second,
                max_ops_per_second=self.max_ops_per_second,
            )
        )
        tally = _WriteTally()

        def on_write_result(reference, result, writer) -> None:
            tally.record_success()

        def on_write_error(failure: BulkWriteFailure, writer) -> bool:
            path = failure.operation.reference.path
            if failure.attempts < self.max_attempts:
                logger.debug(
                    f"Retrying write to {path} (attempt {failure.attempts}): "
                    f"{failure.code} {failure.message}"
                )
                return True
            logger.error(
                f"Write to {path} failed after {failure.attempts} attempts: "
                f"{failure.code} {failure.message}"
            )
            tally.record_failure(path)
            return False

        bulk_writer.on_write_result(on_write_result)
        bulk_writer.on_write_error(on_write_error)

        submitted = 0
        try:
            for write in writes:
                name = split_document_name(write.name)
                if (name.project_id, name.database_id) != (project_id, database_id):
                    raise ValueError(
                        f"Write {write.name} does not target "
                        f"projects/{project_id}/databases/{database_id}"
                    )
                bulk_writer.set(client.document(name.relative_path), write.fields)
                submitted += 1
        finally:
            # Flush what was enqueued even when the source stream failed.
            bulk_writer.close()

        summary = BulkWriteSummary(
            database_id=database_id,
            submitted=submitted,
            succeeded=tally.succeeded,
            failed=len(tally.failed_documents),
            failed_documents=tally.failed_documents,
        )
        logger.info(
            f"Bulk write to {database_id} finished: {summary.succeeded} succeeded, "
            f"{summary.failed} failed of {summary.submitted}"
        )
        return summary
