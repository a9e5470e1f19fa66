# =============================================================================
# EIP Status Shared Libraries
# =============================================================================
# This package contains shared libraries for the EIP status API.
# See individual sub-packages for detailed documentation.
# =============================================================================

"""
EIP status shared libraries.

Sub-packages:
- models: Pydantic data models, schemas and settings
"""

__version__ = "0.1.0"
