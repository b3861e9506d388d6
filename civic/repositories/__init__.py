"""
Persistence adapters.

Only an in-memory store exists today; services depend on its list/get/create
contract rather than on the underlying mappings.
"""

from .memory_repository import Collection, MemoryRepository

__all__ = ["Collection", "MemoryRepository"]
