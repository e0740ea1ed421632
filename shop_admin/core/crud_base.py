# shop_admin/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

- CRUDBase: 단일 테이블에 대한 기본 CRUD
- CRUDStagingBase: 스테이징 테이블 전용 CRUD (소프트 삭제/복원, 일괄 저장, 비우기)
- PartialUpdate: 부분 수정 스키마의 기반 클래스 (NOT NULL 컬럼에 대한 null 거부)
"""

import logging
from typing import ClassVar, Generic, List, Optional, Sequence, Tuple, Type, TypeVar, Any

from fastapi import status
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel, model_validator

from shop_admin.core.publishing import StagingState
from shop_admin.core.responses import ApiException

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class PartialUpdate(SQLModel):
    """
    부분 수정 스키마의 기반 클래스입니다.
    생략한 필드는 기존 값을 유지하며, NOT_NULL_FIELDS에 속한 필드는 null로 보낼 수 없습니다 (422).
    """
    NOT_NULL_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = [
            name for name in self.NOT_NULL_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 단일 레코드를 조회합니다."""
        return await db.get(self.model, id)

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: int = 100, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model)

        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        query = query.order_by(self.model.id).offset(skip).limit(limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalars().first()

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """새로운 레코드를 생성합니다."""
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType
    ) -> ModelType:
        """기존 레코드를 업데이트합니다. 전달된 필드만 반영합니다."""
        update_data = obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        return await self.save_update(db, db_obj=db_obj)

    async def save_update(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        변경된 레코드를 커밋합니다. DB 제약 위반은 롤백 후 400 ApiException으로 변환합니다.
        """
        obj_id = db_obj.id  # 롤백 후에는 만료된 객체에 접근할 수 없습니다.
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning("Update of %s id=%s violated a database constraint", self.model.__name__, obj_id)
            raise ApiException(status.HTTP_400_BAD_REQUEST, "Update violates a database constraint")
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 레코드를 삭제합니다."""
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj


class CRUDStagingBase(CRUDBase[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    스테이징 테이블 전용 CRUD 클래스입니다.

    - unique_field: 활성 스테이징 행 사이에서 중복을 허용하지 않는 자연 키 (예: "slug", "code")
    - order_by: 목록 조회 정렬 필드
    """
    def __init__(
        self,
        model: Type[ModelType],
        *,
        unique_field: Optional[str] = None,
        order_by: Optional[Sequence[str]] = None,
    ):
        super().__init__(model)
        self.unique_field = unique_field
        self.order_by = list(order_by or ["id"])

    async def get_staging_multi(self, db: AsyncSession, *, include_removed: bool = False) -> List[ModelType]:
        """
        스테이징 목록을 조회합니다.
        기본적으로 삭제 예정(PENDING_REMOVAL) 행은 제외합니다.
        """
        query = select(self.model)
        if not include_removed:
            query = query.where(self.model.state == StagingState.ACTIVE)
        query = query.order_by(*(getattr(self.model, name) for name in self.order_by))
        result = await db.execute(query)
        return result.scalars().all()

    async def get_active_by_key(
        self, db: AsyncSession, *, value: Any, exclude_id: Optional[int] = None
    ) -> Optional[ModelType]:
        """자연 키로 활성 스테이징 행을 조회합니다. unique_field가 없으면 항상 None입니다."""
        if self.unique_field is None or value is None:
            return None
        statement = select(self.model).where(
            getattr(self.model, self.unique_field) == value,
            self.model.state == StagingState.ACTIVE,
        )
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        result = await db.execute(statement)
        return result.scalars().first()

    async def mark_removed(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """소프트 삭제: 게시 시 제외되도록 삭제 예정 상태로 표시합니다."""
        db_obj.state = StagingState.PENDING_REMOVAL
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def restore(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        db_obj.state = StagingState.ACTIVE
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def replace_all(
        self,
        db: AsyncSession,
        *,
        items: Sequence[CreateSchemaType],
        removed: Sequence[CreateSchemaType] = (),
    ) -> Tuple[int, int]:
        """
        스테이징 전체를 주어진 목록으로 교체합니다 (일괄 저장).
        하나의 트랜잭션으로 처리하며 (활성 건수, 삭제 예정 건수)를 반환합니다.
        """
        try:
            await db.execute(delete(self.model))
            rows = [self.model.model_validate(item, update={"state": StagingState.ACTIVE}) for item in items]
            rows += [self.model.model_validate(item, update={"state": StagingState.PENDING_REMOVAL}) for item in removed]
            db.add_all(rows)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return len(items), len(removed)

    async def clear(self, db: AsyncSession) -> int:
        """스테이징 행을 모두 삭제하고 삭제 건수를 반환합니다."""
        result = await db.execute(delete(self.model))
        await db.commit()
        return result.rowcount
