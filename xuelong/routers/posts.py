from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from .deps import get_services, require_admin

router = APIRouter(prefix="/api/posts", tags=["posts"])


async def _image_url(request: Request, image: Optional[UploadFile]) -> Optional[str]:
    if not image or not image.filename:
        return None
    stored = await get_services(request).uploads.save("image", image)
    return stored.url


@router.get("")
def list_posts(request: Request, published: bool = False):
    return get_services(request).posts.list(published_only=published)


@router.get("/{post_id}")
def get_post(post_id: int, request: Request):
    return get_services(request).posts.get(post_id)


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_post(
    request: Request,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    published: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    posts = get_services(request).posts
    # Validate before storing the image so rejected posts leave no file behind.
    posts.require_fields(title, content)
    return posts.create(
        title=title,
        content=content,
        author=author,
        published=published,
        image_url=await _image_url(request, image),
    )


@router.put("/{post_id}", dependencies=[Depends(require_admin)])
async def update_post(
    post_id: int,
    request: Request,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    published: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    posts = get_services(request).posts
    posts.get(post_id)
    return posts.update(
        post_id,
        title=title,
        content=content,
        author=author,
        published=published,
        image_url=await _image_url(request, image),
    )


@router.delete("/{post_id}", dependencies=[Depends(require_admin)])
def delete_post(post_id: int, request: Request):
    get_services(request).posts.delete(post_id)
    return {"message": "Post deleted successfully"}
