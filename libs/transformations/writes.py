# =============================================================================
# Write Request Assembly
# =============================================================================
# Pairs a mapped field map with its document name. Each write replaces the
# whole document at that name; there is no merge.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Mapping

from .mapper import row_to_fields
from .paths import DocumentPathBuilder, split_document_name

__all__ = ["DocumentWrite", "RowTransformer", "build_write"]


@dataclass(frozen=True)
class DocumentWrite:
    """
    Full-document replace of ``name`` with ``fields``.

    Attributes:
        name: Fully-qualified document name
        fields: Complete field map of the document
    """

    name: str
    fields: dict[str, str]

    @property
    def relative_path(self) -> str:
        """Document path relative to the database root."""
        return split_document_name(self.name).relative_path


def build_write(fields: dict[str, str], name: str) -> DocumentWrite:
    return DocumentWrite(name=name, fields=fields)


class RowTransformer:
    """
    Turns query rows into document writes for one run.

    Stateless apart from the path builder, which is itself immutable, so one
    instance can be shared by every worker handling the run.
    """

    def __init__(self, path_builder: DocumentPathBuilder):
        self.path_builder = path_builder

    def __call__(self, row: Mapping[str, Any]) -> DocumentWrite:
        fields = row_to_fields(row)
        return build_write(fields, self.path_builder.next_path())
