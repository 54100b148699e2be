"""
Shared pytest fixtures for export pipeline tests.

Provides reusable configuration and deterministic id generation to avoid
duplication across test files.
"""

import itertools

import pytest

from libs.models import ExportRunConfig, FirestoreTarget


# =============================================================================
# Target / Run Config Fixtures
# =============================================================================

@pytest.fixture
def firestore_target():
    """Target with a resolved project and the default database."""
    return FirestoreTarget(project_id="test-project")


@pytest.fixture
def valid_run_config_dict():
    """Complete valid export run config dictionary."""
    return {
        "query": "SELECT id, name FROM `test-project.dataset.people`",
        "firestore_collection": "runs",
        "run_id": "abc123",
        "firestore_database_id": None,
    }


@pytest.fixture
def valid_run_config(valid_run_config_dict):
    """Complete valid ExportRunConfig model instance."""
    return ExportRunConfig(**valid_run_config_dict)


# =============================================================================
# Id Generation Fixtures
# =============================================================================

@pytest.fixture
def sequential_ids():
    """Deterministic id factory: id-0, id-1, id-2, ..."""
    counter = itertools.count()
    return lambda: f"id-{next(counter)}"
