from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from clients_api.domain.clients import decode_client_payload, parse_client_id
from clients_api.services.client_service import ClientService

router = APIRouter(prefix="/client", tags=["clients"])


def _get_client_service(request: Request) -> ClientService:
    svc = getattr(getattr(request.app, "state", None), "client_service", None)
    if not svc:
        raise RuntimeError("ClientService nao configurado")
    return svc


@router.get("")
def list_clients(request: Request):
    svc = _get_client_service(request)
    return JSONResponse(svc.list_clients())


@router.get("/{client_id}")
def get_client(client_id: str, request: Request):
    cid = parse_client_id(client_id)
    client = _get_client_service(request).get_client(cid)
    return JSONResponse(client.to_dict())


@router.post("")
async def create_client(request: Request):
    client = decode_client_payload(await request.body())
    created = await run_in_threadpool(_get_client_service(request).create_client, client)
    return JSONResponse(created.to_dict(), status_code=201)


@router.put("/{client_id}")
async def update_client(client_id: str, request: Request):
    cid = parse_client_id(client_id)
    svc = _get_client_service(request)
    # an absent client answers 404 even when the body is malformed
    await run_in_threadpool(svc.ensure_exists, cid)
    patch = decode_client_payload(await request.body())
    updated = await run_in_threadpool(svc.update_client, cid, patch)
    return JSONResponse(updated.to_dict())


@router.delete("/{client_id}")
def delete_client(client_id: str, request: Request):
    cid = parse_client_id(client_id)
    _get_client_service(request).delete_client(cid)
    return Response(status_code=204)
