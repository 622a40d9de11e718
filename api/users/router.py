from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.engine import Engine

from api.users.schemas import UserCreateRequest, UserOut
from user_store import get_engine
from .service import find_all_users, find_user_by_id, save_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/findAll", response_model=list[UserOut])
def find_all_route(engine: Engine = Depends(get_engine)):
    try:
        return find_all_users(engine)
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to load users: {exc}") from exc


@router.get("/findById", response_model=UserOut | None)
def find_by_id_query_route(
    id: int = Query(..., description="User identifier"),
    engine: Engine = Depends(get_engine),
):
    return _find_by_id(engine, id)


@router.get("/{user_id}", response_model=UserOut | None)
def find_by_id_route(user_id: int, engine: Engine = Depends(get_engine)):
    return _find_by_id(engine, user_id)


@router.post("", response_model=UserOut)
def create_route(request: UserCreateRequest, engine: Engine = Depends(get_engine)):
    try:
        return save_user(engine, request)
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to save user: {exc}") from exc


def _find_by_id(engine: Engine, user_id: int) -> UserOut | None:
    try:
        return find_user_by_id(engine, user_id)
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to load user: {exc}") from exc
