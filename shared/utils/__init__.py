"""
Shared utilities
"""

from .query import flatten_params, encode_params

__all__ = ["flatten_params", "encode_params"]
