# shop_admin/domains/usr/routers.py

"""
'usr' 도메인 (사용자 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- 로그인/내 정보 엔드포인트는 OAuth2 표준 응답을 그대로 사용합니다.
- 사용자 관리 엔드포인트는 관리자 전용이며 공통 응답 봉투를 사용합니다.
"""

from typing import List
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core.config import settings
from shop_admin.core.database import get_session
from shop_admin.core import dependencies as deps
from shop_admin.core.responses import ApiException, ApiResponse, success_response

from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas


router = APIRouter(
    tags=["User Management (사용자 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 인증 (Authentication) 엔드포인트
# =============================================================================

@router.post("/auth/token", response_model=usr_schemas.Token, summary="Access Token 획득")
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_session),
):
    """username 필드에 이메일을 입력합니다."""
    user = await usr_crud.user.authenticate(db, email=form_data.username, password=form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = deps.create_access_token(data={"sub": user.email}, expires_delta=access_token_expires)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/auth/me", response_model=usr_schemas.UserRead, summary="현재 사용자 정보 조회")
async def read_users_me(current_user: usr_models.User = Depends(deps.get_current_active_user)):
    return current_user


# =============================================================================
# 2. 사용자 (User) 관리 엔드포인트
# =============================================================================
@router.post(
    "/users",
    response_model=ApiResponse[usr_schemas.UserRead],
    status_code=status.HTTP_201_CREATED,
    summary="새 사용자 생성",
)
async def create_user(
    user: usr_schemas.UserCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    db_user = await usr_crud.user.create(db, obj_in=user)
    return success_response(db_user, message="User created")


@router.get("/users", response_model=ApiResponse[List[usr_schemas.UserRead]], summary="모든 사용자 조회")
async def read_users(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    users = await usr_crud.user.get_multi(db, skip=skip, limit=limit)
    return success_response(users, count=len(users))


@router.get("/users/{user_id}", response_model=ApiResponse[usr_schemas.UserRead], summary="특정 사용자 조회")
async def read_user(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    user = await usr_crud.user.get(db, user_id)
    if not user:
        raise ApiException(status.HTTP_404_NOT_FOUND, "User not found")
    return success_response(user)


@router.put("/users/{user_id}", response_model=ApiResponse[usr_schemas.UserRead], summary="사용자 업데이트")
async def update_user(
    user_id: int,
    user_in: usr_schemas.UserUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    """
    ID로 사용자 정보를 업데이트합니다.
    관리자는 자신의 관리자 역할을 해제하거나 자신을 비활성화할 수 없습니다.
    """
    db_user = await usr_crud.user.get(db, user_id)
    if not db_user:
        raise ApiException(status.HTTP_404_NOT_FOUND, "User not found")

    if db_user.id == current_admin_user.id:
        if user_in.role is not None and user_in.role != usr_models.UserRole.ADMIN:
            raise ApiException(status.HTTP_400_BAD_REQUEST, "Cannot remove your own admin role.")
        if user_in.is_active is False:
            raise ApiException(status.HTTP_400_BAD_REQUEST, "Cannot deactivate your own account.")

    db_user = await usr_crud.user.update(db, db_obj=db_user, obj_in=user_in)
    return success_response(db_user, message="User updated")


@router.delete("/users/{user_id}", response_model=ApiResponse[usr_schemas.UserRead], summary="사용자 삭제")
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_admin_user: usr_models.User = Depends(deps.get_current_admin_user),
):
    """
    ID로 사용자를 삭제합니다. 관리자 계정은 삭제할 수 없습니다.
    """
    db_user = await usr_crud.user.remove(db, id=user_id)
    return success_response(db_user, message="User deleted")
