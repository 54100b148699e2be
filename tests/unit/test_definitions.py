"""Unit tests for the Dagster code location definitions."""

import importlib

import pytest


@pytest.fixture
def definitions_module():
    return importlib.import_module("services.dagster.export_pipelines.definitions")


def test_resources_bound_from_environment(monkeypatch, definitions_module):
    monkeypatch.delenv("FIRESTORE_PROJECT_ID", raising=False)
    monkeypatch.delenv("BIGQUERY_PROJECT_ID", raising=False)
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")
    monkeypatch.setenv("FIRESTORE_DATABASE_ID", "exports")
    monkeypatch.setenv("BIGQUERY_LOCATION", "EU")

    module = importlib.reload(definitions_module)

    assert module.firestore_resource.project_id == "env-project"
    assert module.firestore_resource.database_id == "exports"
    assert module.bigquery_resource.project_id == "env-project"
    assert module.bigquery_resource.location == "EU"


def test_export_job_registered(definitions_module):
    job = definitions_module.defs.get_job_def("bigquery_to_firestore_job")
    assert {node.name for node in job.graph.nodes} == {
        "resolve_export_plan",
        "export_query_to_firestore",
    }
