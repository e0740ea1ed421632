# shop_admin/core/publishing.py

"""
staging -> production 게시(publish) 트랜잭션을 담당하는 모듈입니다.

모든 리소스 종류(카테고리, 공급업체, 프로모션, 세금 설정, 세금 규칙, 상품)는
PublishableResource 하나로 선언되며, Publisher가 동일한 절차로 게시합니다.

    1. 스테이징 행 전체 조회
    2. 스테이징이 비어 있으면 빈 스테이징 정책(reject/clear) 적용
    3. 하나의 트랜잭션 안에서
       a. 운영(production) 행 전체 삭제
       b. ACTIVE 상태의 스테이징 행만 운영 테이블에 새 ID로 생성
       c. 스테이징 행 전체 삭제 (ACTIVE, PENDING_REMOVAL 모두)
    4. 커밋 후 PublishResult 반환

중간에 예외가 발생하면 세션을 롤백하므로 운영/스테이징 데이터는 호출 전 상태로 유지됩니다.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core.config import settings

logger = logging.getLogger(__name__)

StagingType = TypeVar("StagingType", bound=SQLModel)
ProductionType = TypeVar("ProductionType", bound=SQLModel)

# 운영 테이블로 복사하지 않는 메타 필드 (ID는 게시 때마다 새로 발급)
NON_PUBLISHED_FIELDS = frozenset({"id", "state", "created_at", "updated_at"})


class StagingState(str, Enum):
    """스테이징 행의 상태. 삭제 예정 행은 게시 시 제외되고 스테이징과 함께 비워집니다."""
    ACTIVE = "active"
    PENDING_REMOVAL = "pending_removal"


class EmptyStagingPolicy(str, Enum):
    """스테이징이 비어 있을 때의 게시 정책"""
    REJECT = "reject"  # 게시 거부 (운영 데이터 유지)
    CLEAR = "clear"    # 운영 데이터를 모두 비움


class EmptyStagingError(Exception):
    """reject 정책에서 빈 스테이징을 게시하려 할 때 발생합니다."""

    def __init__(self, label: str):
        super().__init__(f"No staging {label} to publish")
        self.label = label


def publishable_fields(base: Type[SQLModel]) -> List[str]:
    """스테이징/운영 모델이 공유하는 Base 클래스에서 게시 대상 필드 목록을 추출합니다."""
    return [name for name in base.model_fields if name not in NON_PUBLISHED_FIELDS]


@dataclass
class PublishResult(Generic[ProductionType]):
    published: List[ProductionType] = field(default_factory=list)
    skipped_removed: int = 0
    cleared_staging: int = 0

    @property
    def count(self) -> int:
        return len(self.published)


class PublishableResource(Generic[StagingType, ProductionType]):
    """
    게시 가능한 리소스 한 종류를 나타냅니다.
    스테이징 조회, 운영 전체 교체, 스테이징 비우기를 제공합니다.
    """

    def __init__(
        self,
        *,
        label: str,
        staging_model: Type[StagingType],
        production_model: Type[ProductionType],
        fields: Sequence[str],
        order_by: Optional[Sequence[str]] = None,
    ):
        self.label = label
        self.staging_model = staging_model
        self.production_model = production_model
        self.fields = list(fields)
        self.order_by = list(order_by or ["id"])

    def _ordered(self, model: Type[SQLModel]):
        return select(model).order_by(*(getattr(model, name) for name in self.order_by))

    async def read_staging(self, db: AsyncSession) -> List[StagingType]:
        result = await db.execute(self._ordered(self.staging_model))
        return list(result.scalars().all())

    async def read_production(self, db: AsyncSession) -> List[ProductionType]:
        result = await db.execute(self._ordered(self.production_model))
        return list(result.scalars().all())

    async def count_staging(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.count()).select_from(self.staging_model))
        return result.scalar_one()

    def to_production(self, row: StagingType) -> ProductionType:
        return self.production_model(**self._copy(row))

    def _copy(self, row: Any) -> dict:
        return {name: getattr(row, name) for name in self.fields}

    async def replace_production(self, db: AsyncSession, rows: Sequence[StagingType]) -> List[ProductionType]:
        """운영 행을 모두 삭제하고 주어진 스테이징 행으로 다시 채웁니다. 커밋하지 않습니다."""
        await db.execute(delete(self.production_model))
        created = [self.to_production(row) for row in rows]
        db.add_all(created)
        await db.flush()  # 고유 제약 위반은 여기서 IntegrityError로 드러납니다.
        return created

    async def clear_staging(self, db: AsyncSession) -> int:
        """스테이징 행을 상태와 무관하게 모두 삭제합니다. 커밋하지 않습니다."""
        result = await db.execute(delete(self.staging_model))
        return result.rowcount

    async def checkout(self, db: AsyncSession) -> List[StagingType]:
        """
        운영 데이터를 스테이징으로 복사하여 편집을 시작합니다.
        스테이징이 비어 있는지는 호출하는 쪽에서 확인합니다.
        """
        production_rows = await self.read_production(db)
        staged = [self.staging_model(**self._copy(row), state=StagingState.ACTIVE) for row in production_rows]
        db.add_all(staged)
        await db.commit()
        return staged


class Publisher:
    """
    PublishableResource를 하나의 트랜잭션으로 게시합니다.
    policy를 지정하지 않으면 설정(PUBLISH_EMPTY_STAGING_POLICY)을 따릅니다.
    """

    def __init__(self, policy: Optional[EmptyStagingPolicy] = None):
        self._policy = policy

    @property
    def policy(self) -> EmptyStagingPolicy:
        if self._policy is not None:
            return self._policy
        return EmptyStagingPolicy(settings.PUBLISH_EMPTY_STAGING_POLICY)

    async def publish(self, db: AsyncSession, resource: PublishableResource) -> PublishResult:
        policy = self.policy
        try:
            staging_rows = await resource.read_staging(db)
            if not staging_rows and policy is EmptyStagingPolicy.REJECT:
                raise EmptyStagingError(resource.label)

            active_rows = [row for row in staging_rows if row.state == StagingState.ACTIVE]
            published = await resource.replace_production(db, active_rows)
            cleared = await resource.clear_staging(db)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        result = PublishResult(
            published=published,
            skipped_removed=len(staging_rows) - len(active_rows),
            cleared_staging=cleared,
        )
        logger.info(
            "Published %d %s to production (skipped %d pending removal, cleared %d staging rows)",
            result.count, resource.label, result.skipped_removed, result.cleared_staging,
        )
        return result


# 애플리케이션 전역에서 사용하는 기본 Publisher (정책은 설정에서 결정)
publisher = Publisher()
