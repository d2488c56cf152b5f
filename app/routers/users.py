from fastapi import APIRouter

from app.dependencies import CurrentUserDep, UserRepositoryDep
from app.exceptions.custom import UserNotFoundError
from app.schemas.user import User

router = APIRouter()


@router.get("/me", response_model=User)
async def get_me(user: CurrentUserDep, users: UserRepositoryDep) -> User:
    doc = await users.get(user.userId)
    if doc is None:
        raise UserNotFoundError(user.userId)
    return User(**doc)
