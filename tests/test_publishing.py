# tests/test_publishing.py

"""
staging -> production 게시 절차(shop_admin.core.publishing)에 대한 테스트입니다.

- 삭제 예정 행은 게시에서 제외되고 스테이징은 비워집니다.
- 빈 스테이징은 reject 정책에서 거부되고, clear 정책에서는 운영 데이터를 비웁니다.
- 고유 키 충돌 시 트랜잭션 전체가 롤백됩니다.
- 같은 스테이징으로 두 번 게시해도 운영 데이터는 바뀌지 않습니다.
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core.publishing import (
    EmptyStagingError,
    EmptyStagingPolicy,
    Publisher,
    StagingState,
    publishable_fields,
    publisher,
)
from shop_admin.domains.cat import models as cat_models
from shop_admin.domains.cat.crud import categories
from shop_admin.domains.prm import models as prm_models
from shop_admin.domains.prm.crud import promotions


async def _add(db: AsyncSession, *rows):
    db.add_all(rows)
    await db.commit()


def test_publishable_fields_exclude_meta_columns():
    fields = publishable_fields(cat_models.CategoryBase)
    assert "slug" in fields and "parent_slug" in fields
    assert not {"id", "state", "created_at", "updated_at"} & set(fields)


def test_default_policy_is_reject():
    assert publisher.policy is EmptyStagingPolicy.REJECT


@pytest.mark.asyncio
async def test_publish_copies_only_active_rows(db_session: AsyncSession):
    await _add(
        db_session,
        cat_models.Category(name="Old", slug="old"),
        cat_models.CategoryStaging(name="Shoes", slug="shoes", sort_order=1),
        cat_models.CategoryStaging(name="Hats", slug="hats", sort_order=2, state=StagingState.PENDING_REMOVAL),
    )

    result = await Publisher().publish(db_session, categories)

    assert result.count == 1
    assert result.skipped_removed == 1
    assert result.cleared_staging == 2

    production = await categories.read_production(db_session)
    assert [(c.name, c.slug, c.sort_order) for c in production] == [("Shoes", "shoes", 1)]
    assert await categories.count_staging(db_session) == 0


@pytest.mark.asyncio
async def test_publish_empty_staging_rejected(db_session: AsyncSession):
    await _add(db_session, cat_models.Category(name="Live", slug="live"))

    with pytest.raises(EmptyStagingError) as exc_info:
        await Publisher(EmptyStagingPolicy.REJECT).publish(db_session, categories)

    assert str(exc_info.value) == "No staging categories to publish"
    production = await categories.read_production(db_session)
    assert [c.slug for c in production] == ["live"]


@pytest.mark.asyncio
async def test_publish_empty_staging_clear_policy_empties_production(db_session: AsyncSession):
    await _add(db_session, cat_models.Category(name="Live", slug="live"))

    result = await Publisher(EmptyStagingPolicy.CLEAR).publish(db_session, categories)

    assert result.count == 0
    assert await categories.read_production(db_session) == []


@pytest.mark.asyncio
async def test_publish_all_removed_empties_production(db_session: AsyncSession):
    """스테이징에 삭제 예정 행만 있으면 운영 데이터는 모두 삭제됩니다 (빈 스테이징이 아님)."""
    await _add(
        db_session,
        cat_models.Category(name="Live", slug="live"),
        cat_models.CategoryStaging(name="Live", slug="live", state=StagingState.PENDING_REMOVAL),
    )

    result = await Publisher(EmptyStagingPolicy.REJECT).publish(db_session, categories)

    assert result.count == 0
    assert result.skipped_removed == 1
    assert await categories.read_production(db_session) == []
    assert await categories.count_staging(db_session) == 0


@pytest.mark.asyncio
async def test_publish_duplicate_code_rolls_back(db_session: AsyncSession):
    await _add(
        db_session,
        prm_models.Promotion(name="Existing", code="KEEP", value=Decimal("5")),
        prm_models.PromotionStaging(name="First", code="DUP", value=Decimal("10")),
        prm_models.PromotionStaging(name="Second", code="DUP", value=Decimal("20")),
    )

    with pytest.raises(IntegrityError):
        await Publisher().publish(db_session, promotions)

    production = await promotions.read_production(db_session)
    assert [p.code for p in production] == ["KEEP"]
    assert await promotions.count_staging(db_session) == 2


@pytest.mark.asyncio
async def test_publish_twice_is_noop_on_second_run(db_session: AsyncSession):
    await _add(
        db_session,
        cat_models.CategoryStaging(name="Shoes", slug="shoes"),
        cat_models.CategoryStaging(name="Bags", slug="bags"),
    )
    policy_publisher = Publisher(EmptyStagingPolicy.REJECT)

    await policy_publisher.publish(db_session, categories)
    first = [(c.name, c.slug) for c in await categories.read_production(db_session)]

    with pytest.raises(EmptyStagingError):
        await policy_publisher.publish(db_session, categories)

    second = [(c.name, c.slug) for c in await categories.read_production(db_session)]
    assert first == second == [("Bags", "bags"), ("Shoes", "shoes")]


@pytest.mark.asyncio
async def test_checkout_copies_production_into_staging(db_session: AsyncSession):
    await _add(
        db_session,
        cat_models.Category(name="Shoes", slug="shoes", description="Footwear", parent_slug="apparel"),
    )

    staged = await categories.checkout(db_session)

    assert len(staged) == 1
    rows = await categories.read_staging(db_session)
    assert [(r.slug, r.description, r.parent_slug, r.state) for r in rows] == [
        ("shoes", "Footwear", "apparel", StagingState.ACTIVE)
    ]
