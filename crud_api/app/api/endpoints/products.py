"""
Product endpoints.

Same contract as the user routes: list, create, fetch, update
(``PUT`` or ``PATCH``) and delete, with ``{"message": "Product not
found"}`` for unknown ids.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from crud_api.app.api.deps import get_product_store, parse_record_id
from crud_api.app.schemas.common import MessageResponse
from crud_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from crud_api.app.services.product_service import ProductStore

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


@router.get("", response_model=List[ProductRead], response_model_exclude_unset=True)
async def list_products(store: ProductStore = Depends(get_product_store)) -> List[Dict[str, Any]]:
    return store.list()


@router.post(
    "",
    response_model=ProductRead,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    product_in: ProductCreate,
    store: ProductStore = Depends(get_product_store),
) -> Dict[str, Any]:
    return store.create(product_in.model_dump(exclude_unset=True))


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
)
async def get_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> Dict[str, Any]:
    return store.get(parse_record_id(product_id))


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
)
@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
)
async def update_product(
    product_id: str,
    product_in: ProductUpdate,
    store: ProductStore = Depends(get_product_store),
) -> Dict[str, Any]:
    """Merge the given fields into an existing product."""
    return store.update(parse_record_id(product_id), product_in.model_dump(exclude_unset=True))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_product_store),
) -> None:
    store.delete(parse_record_id(product_id))
    return None
