# =============================================================================
# Export Ops - BigQuery to Firestore
# =============================================================================
# Resolves the export target, then streams query rows through the row
# transformer into the Firestore bulk writer.
# =============================================================================

from typing import Any, Callable, Dict, Optional

from dagster import Config, In, OpExecutionContext, Out, op

from libs.models import ExportRunConfig, FirestoreTarget
from libs.transformations import (
    ConfigurationError,
    DocumentPathBuilder,
    RowTransformer,
    new_document_id,
)


__all__ = [
    "ExportJobConfig",
    "LOG_EVERY_N_ROWS",
    "resolve_export_plan",
    "export_query_to_firestore",
]

LOG_EVERY_N_ROWS = 10_000


class ExportJobConfig(Config):
    """Run config for a BigQuery → Firestore export."""

    query: str
    firestore_collection: str
    run_id: Optional[str] = None
    firestore_database_id: Optional[str] = None


def _resolve_export_plan(
    firestore,
    config: Dict[str, Any],
    dagster_run_id: str,
    log,
) -> Dict[str, Any]:
    """
    Core logic for validating run config and resolving the export target.

    Builds the document path builder once so configuration errors (missing
    project, empty collection) fail the run before any query or write.

    Args:
        firestore: FirestoreResource instance
        config: Run config dict (query, firestore_collection, run_id,
            firestore_database_id)
        dagster_run_id: Dagster run ID, used when no run_id is configured
        log: Logger instance (context.log)

    Returns:
        Dict with run_config, target, database_id and collection_path

    Raises:
        pydantic.ValidationError: If the run config is invalid
        ConfigurationError: If the Firestore project cannot be resolved or the
            collection cannot hold documents
    """
    run_config = ExportRunConfig(
        query=config["query"],
        firestore_collection=config["firestore_collection"],
        run_id=config.get("run_id") or dagster_run_id,
        firestore_database_id=config.get("firestore_database_id"),
    )
    target = firestore.default_target()

    builder = DocumentPathBuilder(
        target,
        run_config.firestore_collection,
        run_config.run_id,
        run_config.firestore_database_id,
    )
    # Firestore document paths alternate collection/document segments.
    if len(builder.collection_path.split("/")) % 2 != 0:
        raise ConfigurationError(
            f"Document paths under {builder.collection_path!r} would have an odd "
            "number of segments; firestore_collection must itself have an odd "
            "number of segments (e.g. 'exports/daily')"
        )
    log.info(
        f"Export target: projects/{target.project_id}/databases/{builder.database_id}, "
        f"collection path {builder.collection_path}"
    )

    return {
        "run_config": run_config.model_dump(),
        "target": target.model_dump(),
        "database_id": builder.database_id,
        "collection_path": builder.collection_path,
    }


def _export_query_to_firestore(
    bigquery,
    firestore,
    export_plan: Dict[str, Any],
    log,
    id_factory: Callable[[], str] = new_document_id,
) -> Dict[str, Any]:
    """
    Core logic for exporting query rows as Firestore documents.

    Each row becomes one document whose fields are the row's columns
    stringified, at <collection>/<run_id>/output<generated id>.

    Args:
        bigquery: BigQueryResource instance
        firestore: FirestoreResource instance
        export_plan: Plan dict from _resolve_export_plan
        log: Logger instance (context.log)
        id_factory: Generator of document id suffixes

    Returns:
        Export summary dict with rows_read, documents_written, run_id,
        database_id and collection_path

    Raises:
        RuntimeError: If any document could not be written
    """
    run_config = ExportRunConfig(**export_plan["run_config"])
    target = FirestoreTarget(**export_plan["target"])
    builder = DocumentPathBuilder(
        target,
        run_config.firestore_collection,
        run_config.run_id,
        run_config.firestore_database_id,
        id_factory=id_factory,
    )
    transform = RowTransformer(builder)
    rows_read = 0

    def document_writes():
        nonlocal rows_read
        for row in bigquery.query_rows(run_config.query):
            rows_read += 1
            if rows_read % LOG_EVERY_N_ROWS == 0:
                log.info(f"Transformed {rows_read} rows")
            yield transform(row)

    log.info(f"Running export query for run {run_config.run_id}")
    summary = firestore.bulk_write(
        document_writes(),
        project_id=target.project_id,
        database_id=builder.database_id,
    )
    log.info(
        f"Exported {summary.succeeded} of {rows_read} rows to "
        f"{builder.collection_path} in database {builder.database_id}"
    )

    if summary.failed:
        sample = ", ".join(summary.failed_documents[:5])
        raise RuntimeError(
            f"{summary.failed} of {summary.submitted} documents failed to write "
            f"(e.g. {sample})"
        )

    return {
        "rows_read": rows_read,
        "documents_written": summary.succeeded,
        "run_id": run_config.run_id,
        "database_id": builder.database_id,
        "collection_path": builder.collection_path,
    }


@op(
    out={"export_plan": Out(dagster_type=dict)},
    required_resource_keys={"firestore"},
)
def resolve_export_plan(context: OpExecutionContext, config: ExportJobConfig) -> dict:
    """
    Validate run config and resolve the Firestore target.

    Args:
        context: Dagster op execution context
        config: Export run config

    Returns:
        Export plan dict for export_query_to_firestore

    Raises:
        ValidationError: If the run config is invalid
        ConfigurationError: If the Firestore project cannot be resolved or the
            collection cannot hold documents
    """
    return _resolve_export_plan(
        firestore=context.resources.firestore,
        config=config.model_dump(),
        dagster_run_id=context.run_id,
        log=context.log,
    )


@op(
    ins={"export_plan": In(dagster_type=dict)},
    out={"export_summary": Out(dagster_type=dict)},
    required_resource_keys={"bigquery", "firestore"},
)
def export_query_to_firestore(context: OpExecutionContext, export_plan: dict) -> dict:
    """
    Stream query rows into Firestore, one document per row.

    Args:
        context: Dagster op execution context
        export_plan: Plan dict from resolve_export_plan

    Returns:
        Export summary dict

    Raises:
        RuntimeError: If any document could not be written
    """
    return _export_query_to_firestore(
        bigquery=context.resources.bigquery,
        firestore=context.resources.firestore,
        export_plan=export_plan,
        log=context.log,
    )
