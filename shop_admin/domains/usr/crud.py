# shop_admin/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import status

from shop_admin.core.crud_base import CRUDBase
from shop_admin.core.responses import ApiException
from shop_admin.core.security import get_password_hash, verify_password
from . import models as usr_models
from . import schemas as usr_schemas


class CRUDUser(CRUDBase[usr_models.User, usr_schemas.UserCreate, usr_schemas.UserUpdate]):
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        """이메일로 사용자를 조회합니다."""
        return await self.get_by_attribute(db, attribute="email", value=email)

    async def create(self, db: AsyncSession, *, obj_in: usr_schemas.UserCreate) -> usr_models.User:
        """새로운 사용자를 생성하며 비밀번호를 해싱하고 중복을 검사합니다."""
        if await self.get_by_email(db, email=obj_in.email):
            raise ApiException(status.HTTP_400_BAD_REQUEST, "Email already registered")

        user_data = obj_in.model_dump(exclude={"password"})
        db_user = usr_models.User(**user_data, password_hash=get_password_hash(obj_in.password))

        db.add(db_user)
        await db.commit()
        await db.refresh(db_user)
        return db_user

    async def authenticate(self, db: AsyncSession, *, email: str, password: str) -> Optional[usr_models.User]:
        """이메일과 비밀번호를 사용하여 사용자를 인증합니다."""
        user = await self.get_by_email(db, email=email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    async def update(self, db: AsyncSession, *, db_obj: usr_models.User, obj_in: usr_schemas.UserUpdate) -> usr_models.User:
        """
        사용자 정보를 업데이트합니다. 비밀번호가 전달되면 해싱하여 저장합니다.
        """
        if obj_in.email is not None and obj_in.email != db_obj.email:
            existing = await self.get_by_email(db, email=obj_in.email)
            if existing and existing.id != db_obj.id:
                raise ApiException(status.HTTP_400_BAD_REQUEST, "Email already registered")

        update_data = obj_in.model_dump(exclude_unset=True)
        password = update_data.pop("password", None)
        if password:
            db_obj.password_hash = get_password_hash(password)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        return await self.save_update(db, db_obj=db_obj)

    async def remove(self, db: AsyncSession, *, id: int) -> usr_models.User:
        """
        사용자를 삭제합니다. 관리자 계정은 삭제를 허용하지 않습니다.
        """
        user_to_delete = await self.get(db, id=id)
        if not user_to_delete:
            raise ApiException(status.HTTP_404_NOT_FOUND, "User not found")

        if user_to_delete.role == usr_models.UserRole.ADMIN:
            raise ApiException(status.HTTP_400_BAD_REQUEST, "Cannot delete an admin account.")

        return await super().delete(db, id=id)


user = CRUDUser()
