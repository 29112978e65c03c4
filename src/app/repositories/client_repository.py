"""Client Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.client import Client


class ClientRepository(ABC):
    """Repository interface for Client persistence"""

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        pass
