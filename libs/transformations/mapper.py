# =============================================================================
# Row-to-Document Mapper
# =============================================================================
# Converts one tabular record into a flat Firestore field map.
# =============================================================================

from typing import Any, Mapping

__all__ = ["NULL_PLACEHOLDER", "coerce_value", "row_to_fields"]

# SQL NULL has no textual form; it is stored as an empty string.
NULL_PLACEHOLDER = ""


def coerce_value(value: Any) -> str:
    """
    Render a column value as a Firestore string value.

    Every source type is stringified with its default display form, so
    ``42`` becomes ``"42"`` and ``True`` becomes ``"True"``. Nested values
    (RECORD / REPEATED columns) are stringified as a whole, not flattened.
    """
    if value is None:
        return NULL_PLACEHOLDER
    return str(value)


def row_to_fields(row: Mapping[str, Any]) -> dict[str, str]:
    """
    Map one query row to document fields.

    Column names are used as field names without validation; the output has
    exactly the keys of the input.

    Args:
        row: Column name → value mapping for one result row

    Returns:
        Field name → string value mapping
    """
    return {key: coerce_value(value) for key, value in row.items()}
