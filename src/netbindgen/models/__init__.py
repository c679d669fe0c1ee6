"""Data models for network descriptors."""

from netbindgen.models.network import Network

__all__ = [
    "Network",
]
