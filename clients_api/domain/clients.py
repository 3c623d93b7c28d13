"""Domain helpers for the Client record: decoding, ID parsing and merging."""
from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, replace
from typing import Any, Iterable, Mapping, Optional

CLIENT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
TEXT_FIELDS = ("name", "cpf", "email", "phone", "birthdate")
ID_STRATEGIES = ("max", "count")
CLIENT_ID_MIN = -(2**63)
CLIENT_ID_MAX = 2**63 - 1

_decoder = json.JSONDecoder()


class ClientError(Exception):
    """Base exception for client workflow; carries the HTTP status to answer with."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidClientIdError(ClientError):
    """Raised when the path parameter is not an integer."""

    def __init__(self, message: str = "Invalid client ID") -> None:
        super().__init__(message)


class InvalidClientPayloadError(ClientError):
    """Raised when a request body cannot be decoded into a Client."""


class ClientNotFoundError(ClientError):
    """Raised when no stored client has the requested ID."""

    status_code = 404

    def __init__(self, message: str = "Client not found") -> None:
        super().__init__(message)


@dataclass
class Client:
    id: int = 0
    name: str = ""
    cpf: str = ""
    email: str = ""
    phone: str = ""
    birthdate: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Client":
        """Build a Client from a decoded JSON object.

        Unknown keys are ignored and missing/null fields become empty
        strings. A ``null`` document is an empty client. Wrong value types
        raise ``InvalidClientPayloadError``.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidClientPayloadError(
                f"cannot decode {type(data).__name__} into a client object"
            )
        values: dict[str, Any] = {}
        raw_id = data.get("id")
        if raw_id is not None:
            if isinstance(raw_id, bool) or not isinstance(raw_id, int):
                raise InvalidClientPayloadError("field 'id' must be an integer")
            values["id"] = raw_id
        for name in TEXT_FIELDS:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidClientPayloadError(f"field '{name}' must be a string")
            values[name] = value
        return cls(**values)


def parse_client_id(raw: str | None) -> int:
    """Convert a path parameter to a signed 64-bit int, accepting an optional sign and digits only."""
    value = raw or ""
    if not CLIENT_ID_PATTERN.fullmatch(value):
        raise InvalidClientIdError()
    client_id = int(value)
    if not CLIENT_ID_MIN <= client_id <= CLIENT_ID_MAX:
        raise InvalidClientIdError()
    return client_id


def decode_client_payload(body: bytes) -> Client:
    """Decode the first JSON value of a request body.

    JSON errors keep the decoder's own message. Bytes after the first value
    are ignored and a ``null`` body decodes to an empty client.
    """
    try:
        text = body.decode("utf-8")
        start = len(text) - len(text.lstrip())
        data, _ = _decoder.raw_decode(text, start)
    except ValueError as exc:
        raise InvalidClientPayloadError(str(exc)) from exc
    return Client.from_dict(data)


def merge_client(stored: Client, patch: Client) -> Client:
    """Partial-update merge: non-empty fields of ``patch`` overwrite ``stored``."""
    changes = {name: getattr(patch, name) for name in TEXT_FIELDS if getattr(patch, name)}
    return replace(stored, **changes)


def next_client_id(existing_ids: Iterable[int], strategy: str = "max") -> int:
    """Return the ID for a new client.

    ``max`` hands out ``max(ids) + 1`` so a deleted top ID is never reused
    while lower ones remain; ``count`` is the legacy ``len(ids) + 1`` rule,
    which can collide after deletions.
    """
    if strategy not in ID_STRATEGIES:
        raise ValueError(f"unknown id strategy: {strategy!r}")
    ids = list(existing_ids)
    if strategy == "count":
        return len(ids) + 1
    return max(ids, default=0) + 1
