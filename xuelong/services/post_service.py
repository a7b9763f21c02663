"""Blog posts."""
from __future__ import annotations

from typing import Optional

from xuelong.core.utils import now_iso, parse_bool
from xuelong.repositories import DocumentMirror, IdSequence
from xuelong.repositories.defaults import POSTS

from .errors import NotFoundError, ValidationError

DEFAULT_AUTHOR = "XUELONG AI"


class PostService:
    def __init__(self, mirror: DocumentMirror, ids: IdSequence) -> None:
        self.mirror = mirror
        self.ids = ids

    def _find(self, posts: list[dict], post_id: int) -> dict:
        for post in posts:
            if post.get("id") == post_id:
                return post
        raise NotFoundError("Post not found")

    @staticmethod
    def require_fields(title: Optional[str], content: Optional[str]) -> tuple[str, str]:
        title = (title or "").strip()
        content = (content or "").strip()
        if not title or not content:
            raise ValidationError("Title and content are required")
        return title, content

    def list(self, *, published_only: bool = False) -> list[dict]:
        with self.mirror.reading() as posts:
            if published_only:
                return [p for p in posts if p.get("published")]
            return list(posts)

    def get(self, post_id: int) -> dict:
        with self.mirror.reading() as posts:
            return self._find(posts, post_id)

    def create(
        self,
        *,
        title: Optional[str],
        content: Optional[str],
        author: Optional[str] = None,
        published=None,
        image_url: Optional[str] = None,
    ) -> dict:
        title, content = self.require_fields(title, content)
        with self.mirror.transaction() as posts:
            post = {
                "id": self.ids.next(POSTS, (p.get("id") for p in posts)),
                "title": title,
                "content": content,
                "author": author or DEFAULT_AUTHOR,
                "published": parse_bool(published) if published is not None else False,
                "createdAt": now_iso(),
                "image": image_url,
            }
            posts.insert(0, post)
            return post

    def update(
        self,
        post_id: int,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        author: Optional[str] = None,
        published=None,
        image_url: Optional[str] = None,
    ) -> dict:
        with self.mirror.transaction() as posts:
            post = self._find(posts, post_id)
            post["title"] = title or post.get("title")
            post["content"] = content or post.get("content")
            post["author"] = author or post.get("author")
            if published is not None:
                post["published"] = parse_bool(published)
            if image_url:
                post["image"] = image_url
            post["updatedAt"] = now_iso()
            return post

    def delete(self, post_id: int) -> None:
        with self.mirror.transaction() as posts:
            posts.remove(self._find(posts, post_id))

    def count(self) -> int:
        with self.mirror.reading() as posts:
            return len(posts)
