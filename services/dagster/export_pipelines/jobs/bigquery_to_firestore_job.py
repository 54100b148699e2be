"""BigQuery to Firestore export job (op-based)."""

from dagster import job

from ..ops import export_query_to_firestore, resolve_export_plan


@job(
    name="bigquery_to_firestore_job",
    description="Export the rows of a BigQuery query as Firestore documents under <collection>/<run_id>/.",
)
def bigquery_to_firestore_job():
    """
    Export pipeline.

    Flow:
    1. resolve_export_plan: Validate run config and resolve project/database
    2. export_query_to_firestore: Query BigQuery, map rows, bulk write

    Run config goes to resolve_export_plan:
        ops:
          resolve_export_plan:
            config:
              query: "SELECT ..."
              firestore_collection: "exports"
              run_id: "abc123"            # optional, defaults to the Dagster run id
              firestore_database_id: "db" # optional
    """
    export_plan = resolve_export_plan()
    export_query_to_firestore(export_plan)
