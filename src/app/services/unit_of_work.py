"""Unit of Work Interface

Defines the transaction boundary used by use cases.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Transaction boundary for a single use case execution

    All repository writes made between two commits belong to the same
    transaction and are discarded together on rollback.
    """

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
