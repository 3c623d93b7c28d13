"""In-memory client store; state lives only as long as the process."""
from __future__ import annotations

from copy import copy
from typing import Dict, Optional

from clients_api.domain.clients import Client
from clients_api.repositories.base import ClientRepository


class InMemoryRepository(ClientRepository):
    name = "memory"

    def __init__(self) -> None:
        self._clients: Dict[int, Client] = {}

    def load_all(self) -> list[Client]:
        return [copy(c) for c in self._clients.values()]

    def get(self, client_id: int) -> Optional[Client]:
        client = self._clients.get(client_id)
        return copy(client) if client else None

    def add(self, client: Client) -> Client:
        self._clients[client.id] = copy(client)
        return client

    def replace(self, client: Client) -> Optional[Client]:
        if client.id not in self._clients:
            return None
        self._clients[client.id] = copy(client)
        return client

    def delete(self, client_id: int) -> bool:
        return self._clients.pop(client_id, None) is not None

    def dump(self) -> dict:
        # JSON object keys are strings
        return {str(cid): c.to_dict() for cid, c in self._clients.items()}
