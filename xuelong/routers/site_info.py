from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from .deps import get_services, require_admin

router = APIRouter(prefix="/api", tags=["site"])


@router.get("/company")
def get_company(request: Request):
    return get_services(request).site_info.company.get()


@router.put("/company", dependencies=[Depends(require_admin)])
def update_company(payload: dict, request: Request):
    return get_services(request).site_info.company.update(payload)


@router.get("/founder")
def get_founder(request: Request):
    return get_services(request).site_info.founder.get()


@router.put("/founder", dependencies=[Depends(require_admin)])
async def update_founder(request: Request):
    # "photo" is either an uploaded file or a plain URL string, so the form is read by hand.
    services = get_services(request)
    if request.headers.get("content-type", "").startswith("application/json"):
        return services.site_info.update_founder(await request.json())
    form = await request.form()
    payload = {key: form.get(key) for key in ("name", "title", "description")}
    photo = form.get("photo")
    photo_url = None
    if isinstance(photo, UploadFile):
        if photo.filename:
            photo_url = (await services.uploads.save("photo", photo)).url
    else:
        payload["photo"] = photo
    return services.site_info.update_founder(payload, photo_url)


@router.get("/company-intro")
def get_intro(request: Request):
    return get_services(request).site_info.intro.get()


@router.put("/company-intro", dependencies=[Depends(require_admin)])
def update_intro(payload: dict, request: Request):
    return get_services(request).site_info.intro.update(payload)
