"""Client store backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from clients_api.db.models import ClientRow
from clients_api.db.session import get_session
from clients_api.domain.clients import Client, TEXT_FIELDS
from clients_api.repositories.base import ClientRepository, StorageError


def _row_to_client(row: ClientRow) -> Client:
    return Client(
        id=row.id,
        name=row.name or "",
        cpf=row.cpf or "",
        email=row.email or "",
        phone=row.phone or "",
        birthdate=row.birthdate or "",
    )


@contextmanager
def _storage_errors():
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(str(exc)) from exc


class SQLRepository(ClientRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    name = "sql"

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url

    def load_all(self) -> list[Client]:
        with _storage_errors(), get_session(self.database_url) as session:
            rows = session.execute(select(ClientRow).order_by(ClientRow.id)).scalars().all()
            return [_row_to_client(row) for row in rows]

    def get(self, client_id: int) -> Optional[Client]:
        with _storage_errors(), get_session(self.database_url) as session:
            row = session.get(ClientRow, client_id)
            return _row_to_client(row) if row else None

    def add(self, client: Client) -> Client:
        with _storage_errors(), get_session(self.database_url) as session:
            session.add(ClientRow(**client.to_dict()))
            session.commit()
        return client

    def replace(self, client: Client) -> Optional[Client]:
        with _storage_errors(), get_session(self.database_url) as session:
            row = session.get(ClientRow, client.id)
            if not row:
                return None
            for name in TEXT_FIELDS:
                setattr(row, name, getattr(client, name))
            session.commit()
        return client

    def delete(self, client_id: int) -> bool:
        with _storage_errors(), get_session(self.database_url) as session:
            result = session.execute(delete(ClientRow).where(ClientRow.id == client_id))
            session.commit()
            return result.rowcount > 0
