"""AI resource links and partners: identical CRUD shapes over JSON arrays."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from .deps import get_services, require_admin

router = APIRouter(prefix="/api", tags=["resources"])


def _collection(request: Request, name: str):
    return getattr(get_services(request), name)


def _register(path: str, attr: str, label: str) -> None:
    @router.get(f"/{path}", name=f"list_{attr}")
    def list_items(request: Request):
        return _collection(request, attr).list()

    @router.get(f"/{path}/{{item_id}}", name=f"get_{attr}")
    def get_item(item_id: int, request: Request):
        return _collection(request, attr).get(item_id)

    @router.post(f"/{path}", status_code=201, name=f"create_{attr}", dependencies=[Depends(require_admin)])
    def create_item(payload: dict, request: Request):
        return _collection(request, attr).create(payload)

    @router.put(f"/{path}/{{item_id}}", name=f"update_{attr}", dependencies=[Depends(require_admin)])
    def update_item(item_id: int, payload: dict, request: Request):
        return _collection(request, attr).update(item_id, payload)

    @router.delete(f"/{path}/{{item_id}}", name=f"delete_{attr}", dependencies=[Depends(require_admin)])
    def delete_item(item_id: int, request: Request):
        _collection(request, attr).delete(item_id)
        return {"message": f"{label} deleted successfully"}


_register("ai-resources", "ai_resources", "AI Resource")
_register("partners", "partners", "Partner")
