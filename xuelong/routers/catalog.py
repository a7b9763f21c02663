from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from xuelong.services.catalog_service import parse_existing_images, poster_url
from xuelong.services.upload_service import present

from .deps import get_services, require_admin

router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("")
def list_services(request: Request):
    return get_services(request).catalog.list()


@router.get("/{service_id}")
def get_service(service_id: int, request: Request):
    return get_services(request).catalog.get(service_id)


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
def create_service(payload: dict, request: Request):
    return get_services(request).catalog.create(payload)


@router.put("/{service_id}", dependencies=[Depends(require_admin)])
def update_service(service_id: int, payload: dict, request: Request):
    return get_services(request).catalog.update(service_id, payload)


@router.delete("/{service_id}", dependencies=[Depends(require_admin)])
def delete_service(service_id: int, request: Request):
    get_services(request).catalog.delete(service_id)
    return {"message": "Service deleted successfully"}


@router.post("/{service_id}/poster", dependencies=[Depends(require_admin)])
async def upload_posters(
    service_id: int,
    request: Request,
    append: bool = False,
    existingImages: Optional[str] = Form(None),
    posters: Optional[List[UploadFile]] = File(None),
):
    services = get_services(request)
    # Reject unknown ids and a bad keep-list before anything is written to disk.
    services.catalog.get(service_id)
    existing = parse_existing_images(existingImages)
    stored = await services.uploads.save_many("posters", present(posters))
    try:
        service = services.catalog.update_posters(
            service_id, existing, [item.url for item in stored], append=append
        )
    except Exception:
        for item in stored:
            services.uploads.delete(item.filename)
        raise
    return {
        "message": "Poster updated successfully",
        "service": service,
        "posterUrl": poster_url(service),
    }
