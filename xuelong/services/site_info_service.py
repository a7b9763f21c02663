"""
Single-object documents: company details, founder profile and the
introduction paragraphs.

Updates follow the admin form semantics: a field left empty keeps its stored
value.
"""
from __future__ import annotations

from typing import Any, Iterable

from xuelong.core.utils import now_iso, pick
from xuelong.repositories import DocumentMirror

COMPANY_FIELDS = ("name", "subtitle", "slogan", "description", "address", "phone", "email")
FOUNDER_FIELDS = ("name", "title", "description", "photo")


class SingletonDocument:
    def __init__(self, mirror: DocumentMirror, fields: Iterable[str]) -> None:
        self.mirror = mirror
        self.fields = tuple(fields)

    def get(self) -> dict:
        with self.mirror.reading() as doc:
            return doc

    def update(self, payload: dict[str, Any]) -> dict:
        with self.mirror.transaction() as doc:
            for key in self.fields:
                doc[key] = pick(payload.get(key), doc.get(key))
            doc["updatedAt"] = now_iso()
            return doc


class SiteInfoService:
    def __init__(self, company: DocumentMirror, founder: DocumentMirror, intro: DocumentMirror) -> None:
        self.company = SingletonDocument(company, COMPANY_FIELDS)
        self.founder = SingletonDocument(founder, FOUNDER_FIELDS)
        self.intro = SingletonDocument(intro, ("paragraphs",))

    def update_founder(self, payload: dict[str, Any], photo_url: str | None = None) -> dict:
        if photo_url:
            payload = {**payload, "photo": photo_url}
        return self.founder.update(payload)
