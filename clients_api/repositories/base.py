"""Storage interface shared by every client backend."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from clients_api.domain.clients import Client


class StorageError(Exception):
    """Raised when the underlying medium cannot be read or written."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientRepository(ABC):
    """CRUD contract; callers serialize access, implementations do not lock."""

    name = "abstract"

    @abstractmethod
    def load_all(self) -> list[Client]:
        ...

    @abstractmethod
    def get(self, client_id: int) -> Optional[Client]:
        ...

    @abstractmethod
    def add(self, client: Client) -> Client:
        ...

    @abstractmethod
    def replace(self, client: Client) -> Optional[Client]:
        ...

    @abstractmethod
    def delete(self, client_id: int) -> bool:
        ...

    def dump(self) -> Union[list, dict]:
        """JSON body for the collection listing."""
        return [client.to_dict() for client in self.load_all()]
