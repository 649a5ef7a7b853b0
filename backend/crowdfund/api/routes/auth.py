"""Auth Routes — registration and login.

Invariants:
    - POST /register → 201 {message, user}; user view never includes the password hash
    - POST /login → 200 {token}
    - Failures surface as CrowdfundError envelopes (EMAIL_ALREADY_EXISTS,
      USER_NOT_FOUND, INVALID_CREDENTIALS), all 400
"""

from fastapi import APIRouter, Depends, status

from crowdfund.core.repository_protocols import UserLike
from crowdfund.schemas.auth import UserLogin, UserRegister
from crowdfund.services.account_service import AccountService
from crowdfund.api.dependencies import get_account_service

router = APIRouter(tags=["auth"])


def user_view(user: UserLike) -> dict:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "createdAt": user.created_at.isoformat() if user.created_at else None,
    }


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: UserRegister,
    accounts: AccountService = Depends(get_account_service),
):
    user = await accounts.register(
        body.name, body.email, body.password, body.role,
    )
    return {"message": "User created", "user": user_view(user)}


@router.post("/login")
async def login(
    body: UserLogin,
    accounts: AccountService = Depends(get_account_service),
):
    token = await accounts.login(body.email, body.password)
    return {"token": token}
