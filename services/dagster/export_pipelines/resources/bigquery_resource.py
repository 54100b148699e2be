# =============================================================================
# BigQuery Resource - Query Engine
# =============================================================================
# Runs the export query as a standard SQL job and streams result rows.
# =============================================================================

import logging
from typing import Any, Iterator, Optional

from dagster import ConfigurableResource
from google.cloud import bigquery
from pydantic import Field

__all__ = ["BigQueryResource"]

logger = logging.getLogger(__name__)


class BigQueryResource(ConfigurableResource):
    """
    Dagster resource for reading query results from BigQuery.

    Rows are fetched page by page and yielded one at a time, so the export
    never holds the full result set in memory.

    Configuration matches BigQuerySettings from libs.models.config.

    Attributes:
        project_id: Project billed for query jobs (default: ADC project)
        location: Query job location (default: inferred by BigQuery)
        page_size: Rows per result page (default: client default)
    """

    project_id: Optional[str] = Field(None, description="Project billed for query jobs")
    location: Optional[str] = Field(None, description="Query job location")
    page_size: Optional[int] = Field(None, description="Rows per result page")

    def get_client(self) -> bigquery.Client:
        """
        Create a BigQuery client instance.

        Returns:
            Client bound to the configured project and location
        """
        return bigquery.Client(project=self.project_id, location=self.location)

    def query_rows(self, query: str) -> Iterator[dict[str, Any]]:
        """
        Execute a standard SQL query and yield each row as a dict.

        Column order of the result schema is preserved in each dict.
        Client and job errors propagate unchanged.

        Args:
            query: Standard SQL query text

        Yields:
            Column name → value mapping per result row
        """
        client = self.get_client()
        job_config = bigquery.QueryJobConfig(use_legacy_sql=False)
        job = client.query(query, job_config=job_config)
        logger.info(f"Started BigQuery job {job.job_id}")

        for row in job.result(page_size=self.page_size):
            yield dict(row.items())
