# =============================================================================
# Unit Tests: Document Path Builder
# =============================================================================

import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from libs.models import FirestoreTarget
from libs.transformations import (
    ConfigurationError,
    DocumentPathBuilder,
    build_document_path,
    new_document_id,
    resolve_database_id,
    split_document_name,
)


# =============================================================================
# Test: Database Resolution
# =============================================================================


class TestResolveDatabaseId:
    def test_configured_value_wins(self):
        assert resolve_database_id("analytics", "(default)") == "analytics"

    def test_none_falls_back_to_default(self):
        assert resolve_database_id(None, "(default)") == "(default)"

    def test_empty_falls_back_to_default(self):
        assert resolve_database_id("", "fallback-db") == "fallback-db"


# =============================================================================
# Test: Path Composition
# =============================================================================


class TestBuildDocumentPath:
    def test_example_path(self, firestore_target):
        path = build_document_path(firestore_target, "runs", "abc123", "XYZ")
        assert path == (
            "projects/test-project/databases/(default)/documents/runs/abc123/outputXYZ"
        )

    def test_generated_id_follows_output_without_separator(self, firestore_target):
        path = build_document_path(firestore_target, "runs", "abc123", "1234")
        assert path.endswith("/abc123/output1234")
        assert "/output/" not in path

    def test_configured_database(self, firestore_target):
        path = build_document_path(
            firestore_target, "runs", "abc123", "X", database_id="analytics"
        )
        assert path.startswith("projects/test-project/databases/analytics/documents/")

    def test_target_default_database(self):
        target = FirestoreTarget(project_id="p", default_database_id="env-db")
        path = build_document_path(target, "runs", "r", "X")
        assert path.startswith("projects/p/databases/env-db/documents/")

    @pytest.mark.parametrize("project_id", [None, ""])
    def test_missing_project_raises(self, project_id):
        target = FirestoreTarget(project_id=project_id)
        with pytest.raises(ConfigurationError, match="project id"):
            build_document_path(target, "runs", "abc123", "X")

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


# =============================================================================
# Test: Id Generation
# =============================================================================


class TestNewDocumentId:
    def test_is_uuid4_text(self):
        generated = new_document_id()
        assert len(generated) == 36
        assert uuid.UUID(generated).version == 4
        assert generated == generated.lower()

    def test_no_collisions_over_10000_calls(self):
        ids = {new_document_id() for _ in range(10_000)}
        assert len(ids) == 10_000


# =============================================================================
# Test: DocumentPathBuilder
# =============================================================================


class TestDocumentPathBuilder:
    def test_uses_injected_ids(self, firestore_target, sequential_ids):
        builder = DocumentPathBuilder(
            firestore_target, "runs", "abc123", id_factory=sequential_ids
        )
        prefix = "projects/test-project/databases/(default)/documents/runs/abc123/output"
        assert builder.next_path() == f"{prefix}id-0"
        assert builder.next_path() == f"{prefix}id-1"

    def test_collection_path(self, firestore_target):
        builder = DocumentPathBuilder(firestore_target, "runs", "abc123")
        assert builder.collection_path == "runs/abc123/output"

    def test_database_resolved_once(self, firestore_target):
        assert DocumentPathBuilder(firestore_target, "c", "r").database_id == "(default)"
        assert (
            DocumentPathBuilder(firestore_target, "c", "r", database_id="db2").database_id
            == "db2"
        )

    def test_missing_project_fails_at_construction(self, sequential_ids):
        calls = []

        def tracking_ids():
            calls.append(1)
            return sequential_ids()

        with pytest.raises(ConfigurationError):
            DocumentPathBuilder(
                FirestoreTarget(project_id=None), "runs", "abc123", id_factory=tracking_ids
            )
        assert calls == []

    @pytest.mark.parametrize("collection, run_id", [("", "abc123"), ("runs", "")])
    def test_empty_collection_or_run_id_rejected(self, firestore_target, collection, run_id):
        with pytest.raises(ConfigurationError):
            DocumentPathBuilder(firestore_target, collection, run_id)

    def test_default_ids_unique_across_threads(self, firestore_target):
        builder = DocumentPathBuilder(firestore_target, "runs", "abc123")
        with ThreadPoolExecutor(max_workers=8) as pool:
            paths = list(pool.map(lambda _: builder.next_path(), range(10_000)))
        assert len(set(paths)) == 10_000


# =============================================================================
# Test: Name Parsing
# =============================================================================


class TestSplitDocumentName:
    def test_round_trip_components(self, firestore_target):
        name = build_document_path(firestore_target, "runs", "abc123", "X", "db2")
        parsed = split_document_name(name)
        assert parsed.project_id == "test-project"
        assert parsed.database_id == "db2"
        assert parsed.relative_path == "runs/abc123/outputX"

    def test_rejects_relative_path(self):
        with pytest.raises(ValueError, match="Not a Firestore document name"):
            split_document_name("runs/abc123/outputX")
