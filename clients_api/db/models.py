"""SQLAlchemy model mirroring the JSON client record."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class ClientRow(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(Text, default="", nullable=False)
    cpf = Column(Text, default="", nullable=False)
    email = Column(Text, default="", nullable=False)
    phone = Column(Text, default="", nullable=False)
    birthdate = Column(Text, default="", nullable=False)
