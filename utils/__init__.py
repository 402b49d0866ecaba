"""
Utilities Package
Node endpoint handling
"""

from .rpc_provider import connect, normalize_endpoint

__all__ = ['connect', 'normalize_endpoint']
