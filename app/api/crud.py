from typing import Callable, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.common import SuccessResponse
from app.services.crud_service import CrudService

ALL_OPERATIONS = ("list", "create", "update", "delete")


def build_crud_router(
    service: CrudService,
    response_schema,
    create_schema=None,
    prepare: Optional[Callable[[dict], dict]] = None,
    operations: tuple = ALL_OPERATIONS,
) -> APIRouter:
    """
    Admin list/create/update/delete endpoints for one table.
    `prepare` can adjust the validated payload before it is written.
    """
    router = APIRouter()
    prepare = prepare or (lambda data: data)

    if "list" in operations:
        @router.get("", response_model=list[response_schema])
        def list_items(db: Session = Depends(get_db)):
            return service.list(db)

    if "create" in operations:
        @router.post("", response_model=response_schema, status_code=201)
        def create_item(body: create_schema, db: Session = Depends(get_db)):
            try:
                return service.create(db, prepare(body.model_dump()))
            except IntegrityError:
                db.rollback()
                raise HTTPException(status_code=409, detail="Conflicts with an existing record")

    if "update" in operations:
        @router.put("/{item_id}", response_model=response_schema)
        def update_item(item_id: int, body: create_schema, db: Session = Depends(get_db)):
            try:
                item = service.update(db, item_id, prepare(body.model_dump()))
            except IntegrityError:
                db.rollback()
                raise HTTPException(status_code=409, detail="Conflicts with an existing record")
            if not item:
                raise HTTPException(status_code=404, detail="Not found")
            return item

    if "delete" in operations:
        @router.delete("/{item_id}", response_model=SuccessResponse)
        def delete_item(item_id: int, db: Session = Depends(get_db)):
            if not service.delete(db, item_id):
                raise HTTPException(status_code=404, detail="Not found")
            return SuccessResponse()

    return router
