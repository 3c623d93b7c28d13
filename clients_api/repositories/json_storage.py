"""
JSON file persistence adapter.

The whole collection lives in one file holding a JSON array. Every call
reads the file again and every mutation rewrites it in full.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import os

from clients_api.domain.clients import Client, ClientError
from clients_api.repositories.base import ClientRepository, StorageError

FILE_MODE = 0o644


def load(path: Path) -> list[Client]:
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise StorageError(str(exc)) from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise StorageError(f"{path}: expected a JSON array, got {type(data).__name__}")
    try:
        return [Client.from_dict(item) for item in data]
    except ClientError as exc:
        raise StorageError(f"{path}: {exc.message}") from exc


def save(path: Path, clients: list[Client]) -> None:
    text = json.dumps([c.to_dict() for c in clients], ensure_ascii=False, indent=2)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise StorageError(str(exc)) from exc


class JSONFileRepository(ClientRepository):
    """Client store backed by a single JSON array file."""

    name = "file"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_all(self) -> list[Client]:
        return load(self.path)

    def get(self, client_id: int) -> Optional[Client]:
        for client in self.load_all():
            if client.id == client_id:
                return client
        return None

    def add(self, client: Client) -> Client:
        clients = self.load_all()
        clients.append(client)
        save(self.path, clients)
        return client

    def replace(self, client: Client) -> Optional[Client]:
        clients = self.load_all()
        for i, current in enumerate(clients):
            if current.id == client.id:
                clients[i] = client
                save(self.path, clients)
                return client
        return None

    def delete(self, client_id: int) -> bool:
        clients = self.load_all()
        remaining = [c for c in clients if c.id != client_id]
        if len(remaining) == len(clients):
            return False
        save(self.path, remaining)
        return True
