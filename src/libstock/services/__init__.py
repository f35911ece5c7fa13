"""Service layer — inventory business rules over injected collaborators.

Services may import from the domain layer only. Concrete stores,
validators, and notifiers are supplied by the caller.
"""

from libstock.services.inventory import InventoryService
from libstock.services.ports import BookStore, MemberValidator, Notifier, TitleLocking

__all__ = ["BookStore", "InventoryService", "MemberValidator", "Notifier", "TitleLocking"]
