"""Owner Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.owner import Owner


class OwnerRepository(ABC):
    """Repository interface for Owner persistence"""

    @abstractmethod
    async def create(self, owner: Owner) -> Owner:
        """
        Create a new owner

        Args:
            owner: Owner entity to persist

        Returns:
            Created Owner with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, owner_id: str) -> Optional[Owner]:
        pass
