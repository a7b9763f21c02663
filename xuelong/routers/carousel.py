from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from .deps import get_services, require_admin

router = APIRouter(prefix="/api/core-service-carousel", tags=["carousel"])


@router.get("")
def get_carousel(request: Request):
    return get_services(request).carousel.get()


@router.put("", dependencies=[Depends(require_admin)])
def update_carousel(payload: dict, request: Request):
    return get_services(request).carousel.update_settings(payload)


@router.post("/images", dependencies=[Depends(require_admin)])
async def upload_images(request: Request, images: Optional[List[UploadFile]] = File(None)):
    services = get_services(request)
    stored = await services.uploads.save_many("images", images)
    added = services.carousel.add_images(stored)
    return {
        "message": "Images uploaded successfully",
        "images": added,
        "carousel": services.carousel.get(),
    }


@router.delete("/images/{image_id}", dependencies=[Depends(require_admin)])
def delete_image(image_id: str, request: Request):
    carousel = get_services(request).carousel.remove_image(image_id)
    return {"message": "Image deleted successfully", "carousel": carousel}


@router.delete("/images", dependencies=[Depends(require_admin)])
def clear_images(request: Request):
    carousel = get_services(request).carousel.clear_images()
    return {"message": "All images cleared successfully", "carousel": carousel}
