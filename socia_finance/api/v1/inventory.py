"""/v1/inventory - products in stock"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from socia_finance.api.v1.schemas import InventoryItemRequest, InventoryItemSchema, InventoryResponse
from socia_finance.api.dependencies import get_current_user, parse_uuid
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.models import InventoryItem
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import InventoryRepository

router = APIRouter()


def _item_schema(item: InventoryItem) -> InventoryItemSchema:
    return InventoryItemSchema(
        item_id=str(item.id),
        name=item.name,
        description=item.description,
        partner_price=item.partner_price,
        sale_price=item.sale_price,
        quantity=item.quantity,
    )


@router.get("/inventory", response_model=InventoryResponse)
def list_inventory(
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Stock with total units and its value at sale price"""
    items = InventoryRepository(db).list_items(user.user_id)
    return InventoryResponse(
        items=[_item_schema(i) for i in items],
        total_units=sum(i.quantity for i in items),
        total_value=sum(i.quantity * float(i.sale_price) for i in items),
    )


@router.post("/inventory", response_model=InventoryItemSchema, status_code=201)
def add_inventory_item(
    request_body: InventoryItemRequest,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = InventoryRepository(db).create_item(
        user_id=user.user_id,
        name=request_body.name,
        description=request_body.description,
        partner_price=request_body.partner_price,
        sale_price=request_body.sale_price,
        quantity=request_body.quantity,
    )
    db.commit()
    return _item_schema(item)


def _get_item_or_404(repo: InventoryRepository, user_id: str, item_id: str) -> InventoryItem:
    item = repo.get_item(user_id, parse_uuid(item_id, "item"))
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.put("/inventory/{item_id}", response_model=InventoryItemSchema)
def update_inventory_item(
    item_id: str,
    request_body: InventoryItemRequest,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace name, prices and stock of an item"""
    repo = InventoryRepository(db)
    item = repo.update_item(
        _get_item_or_404(repo, user.user_id, item_id),
        name=request_body.name,
        description=request_body.description,
        partner_price=request_body.partner_price,
        sale_price=request_body.sale_price,
        quantity=request_body.quantity,
    )
    db.commit()
    return _item_schema(item)


@router.delete("/inventory/{item_id}", status_code=204)
def delete_inventory_item(
    item_id: str,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    repo = InventoryRepository(db)
    repo.delete_item(_get_item_or_404(repo, user.user_id, item_id))
    db.commit()
    return Response(status_code=204)
