# =============================================================================
# Document Path Builder
# =============================================================================
# Derives fully-qualified Firestore document names for exported rows:
#
#   projects/<project>/databases/<db>/documents/<collection>/<run-id>/output<id>
#
# The generated id is appended directly after "output" with no separator.
# Existing consumers read documents at that exact shape.
# =============================================================================

import re
import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from libs.models import FirestoreTarget

__all__ = [
    "ConfigurationError",
    "DocumentName",
    "DocumentPathBuilder",
    "OUTPUT_PREFIX",
    "build_document_path",
    "database_prefix",
    "new_document_id",
    "resolve_database_id",
    "split_document_name",
]

OUTPUT_PREFIX = "output"

_DOCUMENT_NAME_RE = re.compile(
    r"^projects/(?P<project>[^/]+)/databases/(?P<database>[^/]+)/documents/(?P<path>.+)$"
)


class ConfigurationError(ValueError):
    """Raised when run configuration cannot produce a document path."""


@dataclass(frozen=True)
class DocumentName:
    project_id: str
    database_id: str
    relative_path: str


def new_document_id() -> str:
    """Return a fresh random identifier (UUID4, canonical hyphenated form)."""
    return str(uuid.uuid4())


def resolve_database_id(configured: Optional[str], default: str) -> str:
    """Use the configured database when present and non-empty, else the default."""
    if configured:
        return configured
    return default


def database_prefix(project_id: str, database_id: str) -> str:
    return f"projects/{project_id}/databases/{database_id}/documents"


def build_document_path(
    target: FirestoreTarget,
    collection: str,
    run_id: str,
    generated_id: str,
    database_id: Optional[str] = None,
) -> str:
    """
    Compose the document name for one exported row.

    Args:
        target: Default project/database coordinates
        collection: Destination collection name
        run_id: Run identifier namespacing the documents
        generated_id: Unique suffix for this document
        database_id: Database named by the run (optional)

    Returns:
        Fully-qualified Firestore document name

    Raises:
        ConfigurationError: If the project id cannot be resolved
    """
    if not target.project_id:
        raise ConfigurationError(
            "Firestore project id could not be resolved; set FIRESTORE_PROJECT_ID "
            "or GOOGLE_CLOUD_PROJECT, or configure application default credentials"
        )
    database = resolve_database_id(database_id, target.default_database_id)
    relative = f"{collection}/{run_id}/{OUTPUT_PREFIX}{generated_id}"
    return f"{database_prefix(target.project_id, database)}/{relative}"


def split_document_name(name: str) -> DocumentName:
    """
    Parse a fully-qualified document name.

    Raises:
        ValueError: If the name is not of the form
            projects/<p>/databases/<d>/documents/<path>
    """
    match = _DOCUMENT_NAME_RE.match(name)
    if not match:
        raise ValueError(f"Not a Firestore document name: {name!r}")
    return DocumentName(
        project_id=match.group("project"),
        database_id=match.group("database"),
        relative_path=match.group("path"),
    )


class DocumentPathBuilder:
    """
    Produces one document name per exported row for a single run.

    Configuration is validated when the builder is created, so a missing
    project fails the run before anything is queried or written. The builder
    holds no mutable state; the id factory is the only per-call input and
    must be safe to call from several threads (``uuid.uuid4`` is).

    Example:
        >>> builder = DocumentPathBuilder(
        ...     FirestoreTarget(project_id="proj"), "runs", "abc123",
        ...     id_factory=lambda: "0000",
        ... )
        >>> builder.next_path()
        'projects/proj/databases/(default)/documents/runs/abc123/output0000'
    """

    def __init__(
        self,
        target: FirestoreTarget,
        collection: str,
        run_id: str,
        database_id: Optional[str] = None,
        id_factory: Callable[[], str] = new_document_id,
    ):
        if not collection:
            raise ConfigurationError("Firestore collection must not be empty")
        if not run_id:
            raise ConfigurationError("Run id must not be empty")

        self.target = target
        self.collection = collection
        self.run_id = run_id
        self.database_id = resolve_database_id(database_id, target.default_database_id)
        self.id_factory = id_factory

        # Fail fast on an unresolvable project.
        build_document_path(target, collection, run_id, "", self.database_id)

    @property
    def collection_path(self) -> str:
        """Relative path every generated document name starts with."""
        return f"{self.collection}/{self.run_id}/{OUTPUT_PREFIX}"

    def next_path(self) -> str:
        return build_document_path(
            self.target,
            self.collection,
            self.run_id,
            self.id_factory(),
            self.database_id,
        )
