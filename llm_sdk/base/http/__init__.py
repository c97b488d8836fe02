"""HTTP transport package.

Exposes the explicitly constructed, shareable :class:`TransportClient`.
"""

from .client import TransportClient

__all__ = ["TransportClient"]
