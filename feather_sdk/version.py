"""
Version of the feather Python SDK.
"""

# Bump this when publishing
__version__ = "0.1.0"

__all__ = ["__version__"]
