"""
User endpoints.

CRUD routes over the application's in-memory user store.  A missing
user (including a non-integer id in the path) produces a ``404`` with
``{"message": "User not found"}``; the translation is done by the
exception handler registered in ``core.errors``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from crud_api.app.api.deps import get_user_store, parse_record_id
from crud_api.app.schemas.common import MessageResponse
from crud_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from crud_api.app.services.user_service import UserStore

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


@router.get("", response_model=List[UserRead], response_model_exclude_unset=True)
async def list_users(store: UserStore = Depends(get_user_store)) -> List[Dict[str, Any]]:
    """Return all users in creation order."""
    return store.list()


@router.post(
    "",
    response_model=UserRead,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    user_in: UserCreate,
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Create a user; the id is assigned by the store."""
    return store.create(user_in.model_dump(exclude_unset=True))


@router.get(
    "/{user_id}",
    response_model=UserRead,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> Dict[str, Any]:
    return store.get(parse_record_id(user_id))


@router.put(
    "/{user_id}",
    response_model=UserRead,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
)
@router.patch(
    "/{user_id}",
    response_model=UserRead,
    response_model_exclude_unset=True,
    responses=NOT_FOUND,
)
async def update_user(
    user_id: str,
    user_in: UserUpdate,
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Merge the given fields into an existing user.

    Fields missing from the body are left untouched and the ``id`` can
    not be changed.
    """
    return store.update(parse_record_id(user_id), user_in.model_dump(exclude_unset=True))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> None:
    store.delete(parse_record_id(user_id))
    return None
