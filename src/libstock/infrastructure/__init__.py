"""Infrastructure layer — reference stores and member validators.

These adapters satisfy the ports in :mod:`libstock.services.ports`.
They may import the domain model but never the service layer.
"""

from libstock.infrastructure.members import AllowListMemberValidator
from libstock.infrastructure.memory import InMemoryBookStore

__all__ = ["AllowListMemberValidator", "InMemoryBookStore"]
