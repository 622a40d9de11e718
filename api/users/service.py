from sqlalchemy.engine import Engine

from api.users.schemas import UserCreateRequest, UserOut
from user_store import create_user, get_user, list_users


def find_all_users(engine: Engine) -> list[UserOut]:
    return [UserOut(**row) for row in list_users(engine)]


def find_user_by_id(engine: Engine, user_id: int) -> UserOut | None:
    row = get_user(engine, user_id)
    return UserOut(**row) if row else None


def save_user(engine: Engine, request: UserCreateRequest) -> UserOut:
    return UserOut(**create_user(engine, request.name))
