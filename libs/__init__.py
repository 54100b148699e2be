# =============================================================================
# Export Pipeline Shared Libraries
# =============================================================================
# This package contains shared libraries for the BigQuery → Firestore export
# pipeline. See individual sub-packages for detailed documentation.
# =============================================================================

"""
Export pipeline shared libraries.

Sub-packages:
- models: Pydantic data models and settings
- transformations: Row mapping, document addressing and write assembly
"""

__version__ = "0.1.0"
