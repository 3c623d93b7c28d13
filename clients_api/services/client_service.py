"""Client use cases (list, lookup, create, patch-style update, delete)."""

from __future__ import annotations

import logging
import threading
from typing import Union

from clients_api.domain.clients import (
    Client,
    ClientNotFoundError,
    merge_client,
    next_client_id,
)
from clients_api.repositories.base import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Orchestrates a ClientRepository; one lock covers every read-modify-write."""

    def __init__(self, repository: ClientRepository, id_strategy: str = "max") -> None:
        next_client_id([], id_strategy)  # fail fast on an unknown strategy
        self.repository = repository
        self.id_strategy = id_strategy
        self._lock = threading.Lock()

    def list_clients(self) -> Union[list, dict]:
        with self._lock:
            return self.repository.dump()

    def get_client(self, client_id: int) -> Client:
        with self._lock:
            client = self.repository.get(client_id)
        if client is None:
            raise ClientNotFoundError()
        return client

    def create_client(self, client: Client) -> Client:
        with self._lock:
            existing = [c.id for c in self.repository.load_all()]
            client.id = next_client_id(existing, self.id_strategy)
            created = self.repository.add(client)
        logger.info("Created client %s", created.id)
        return created

    def ensure_exists(self, client_id: int) -> None:
        self.get_client(client_id)

    def update_client(self, client_id: int, patch: Client) -> Client:
        with self._lock:
            stored = self.repository.get(client_id)
            if stored is None:
                raise ClientNotFoundError()
            updated = self.repository.replace(merge_client(stored, patch))
        if updated is None:
            raise ClientNotFoundError()
        logger.info("Updated client %s", client_id)
        return updated

    def delete_client(self, client_id: int) -> None:
        with self._lock:
            deleted = self.repository.delete(client_id)
        if not deleted:
            raise ClientNotFoundError()
        logger.info("Deleted client %s", client_id)
