# tests/domains/test_prd_n.py

"""
'prd' 도메인 (상품 관리) API 엔드포인트에 대한 통합 테스트입니다.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.domains.prd import models as prd_models
from shop_admin.domains.prd.crud import product_types, products
from shop_admin.domains.prd.schemas import slugify

BASE_URL = "/api/v1/prd/products"
TYPES_URL = "/api/v1/prd/product-types"


def _product(**overrides) -> dict:
    return {
        "product_code": "SKU-001",
        "product_name": "Running Shoe",
        "selling_price": "89.90",
        "category_slug": "shoes",
        "tags": ["running", "sale"],
        "stock_level": 12,
        "reorder_point": 3,
        **overrides,
    }


@pytest.mark.asyncio
async def test_create_staging_product(editor_client: AsyncClient):
    response = await editor_client.post(f"{BASE_URL}/staging", json=_product())

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["product_code"] == "SKU-001"
    assert data["status"] == "DRAFT"
    assert data["tags"] == ["running", "sale"]
    assert Decimal(data["selling_price"]) == Decimal("89.90")
    assert data["category_slug"] == "shoes"


@pytest.mark.asyncio
async def test_create_staging_product_validation(editor_client: AsyncClient):
    response_price = await editor_client.post(f"{BASE_URL}/staging", json=_product(selling_price="-1"))
    assert response_price.status_code == 422

    response_stock = await editor_client.post(f"{BASE_URL}/staging", json=_product(stock_level=-5))
    assert response_stock.status_code == 422

    response_status = await editor_client.post(f"{BASE_URL}/staging", json=_product(status="SOLD_OUT"))
    assert response_status.status_code == 422


@pytest.mark.asyncio
async def test_create_staging_product_duplicate_code(editor_client: AsyncClient):
    await editor_client.post(f"{BASE_URL}/staging", json=_product())

    response = await editor_client.post(f"{BASE_URL}/staging", json=_product(product_name="Another"))

    assert response.status_code == 400
    assert response.json()["error"] == "product_code 'SKU-001' is already used in staging"


@pytest.mark.asyncio
async def test_update_staging_product_tags_and_status(editor_client: AsyncClient):
    created = await editor_client.post(f"{BASE_URL}/staging", json=_product())
    product_id = created.json()["data"]["id"]

    response = await editor_client.put(
        f"{BASE_URL}/staging/{product_id}",
        json={"tags": ["clearance"], "status": "ACTIVE"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tags"] == ["clearance"]
    assert data["status"] == "ACTIVE"


@pytest.mark.asyncio
async def test_checkout_edit_publish_cycle(
    editor_client: AsyncClient,
    admin_client: AsyncClient,
    db_session: AsyncSession,
):
    db_session.add_all([
        prd_models.Product(product_code="SKU-001", product_name="Running Shoe", selling_price=Decimal("89.90"), tags=["running"]),
        prd_models.Product(product_code="SKU-002", product_name="Old Sandal", selling_price=Decimal("19.00")),
    ])
    await db_session.commit()

    checkout = await editor_client.post(f"{BASE_URL}/staging/checkout")
    assert checkout.status_code == 200
    staged = {p["product_code"]: p["id"] for p in checkout.json()["data"]}
    assert set(staged) == {"SKU-001", "SKU-002"}

    await editor_client.put(f"{BASE_URL}/staging/{staged['SKU-001']}", json={"selling_price": "79.90"})
    await editor_client.delete(f"{BASE_URL}/staging/{staged['SKU-002']}")

    response = await admin_client.post(f"{BASE_URL}/publish")
    assert response.status_code == 200

    production = await products.read_production(db_session)
    assert [(p.product_code, p.selling_price, p.tags) for p in production] == [
        ("SKU-001", Decimal("79.90"), ["running"])
    ]
    assert await products.count_staging(db_session) == 0


# --- 상품 유형 ---

def test_slugify():
    assert slugify("T-Shirts & Tops") == "t-shirts-tops"
    assert slugify("  Running   Shoes ") == "running-shoes"
    assert slugify("!!!") == ""


@pytest.mark.asyncio
async def test_create_staging_product_type_derives_slug(editor_client: AsyncClient):
    response = await editor_client.post(
        f"{TYPES_URL}/staging",
        json={"name": "T-Shirts & Tops", "category_slug": "apparel"},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["slug"] == "t-shirts-tops"
    assert data["category_slug"] == "apparel"
    assert data["state"] == "active"

    response_explicit = await editor_client.post(f"{TYPES_URL}/staging", json={"name": "Hoodies", "slug": "hoods"})
    assert response_explicit.json()["data"]["slug"] == "hoods"


@pytest.mark.asyncio
async def test_create_staging_product_type_validation(editor_client: AsyncClient):
    response_no_slug = await editor_client.post(f"{TYPES_URL}/staging", json={"name": "!!!"})
    assert response_no_slug.status_code == 422

    response_bad_slug = await editor_client.post(f"{TYPES_URL}/staging", json={"name": "Caps", "slug": "Not A Slug"})
    assert response_bad_slug.status_code == 422


@pytest.mark.asyncio
async def test_create_staging_product_type_duplicate_slug(editor_client: AsyncClient):
    await editor_client.post(f"{TYPES_URL}/staging", json={"name": "T-Shirts & Tops"})

    response = await editor_client.post(f"{TYPES_URL}/staging", json={"name": "T Shirts Tops"})

    assert response.status_code == 400
    assert response.json()["error"] == "slug 't-shirts-tops' is already used in staging"


@pytest.mark.asyncio
async def test_update_staging_product_type_null_name_rejected(editor_client: AsyncClient):
    created = await editor_client.post(f"{TYPES_URL}/staging", json={"name": "Hoodies"})
    type_id = created.json()["data"]["id"]

    response = await editor_client.put(f"{TYPES_URL}/staging/{type_id}", json={"name": None})
    assert response.status_code == 422

    response_ok = await editor_client.put(f"{TYPES_URL}/staging/{type_id}", json={"description": "Warm", "sort_order": 2})
    assert response_ok.status_code == 200
    assert response_ok.json()["data"]["sort_order"] == 2


@pytest.mark.asyncio
async def test_publish_product_types_and_products_independently(
    editor_client: AsyncClient,
    admin_client: AsyncClient,
    authorized_client: AsyncClient,
    db_session: AsyncSession,
):
    await editor_client.post(f"{TYPES_URL}/staging", json={"name": "Sneakers", "sort_order": 2})
    await editor_client.post(f"{TYPES_URL}/staging", json={"name": "Boots", "sort_order": 1})
    await editor_client.post(f"{BASE_URL}/staging", json=_product(product_type_slug="sneakers"))

    response = await admin_client.post(f"{TYPES_URL}/publish")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Published 2 product types"
    assert [t["slug"] for t in body["data"]] == ["boots", "sneakers"]
    assert await product_types.count_staging(db_session) == 0

    # 상품 스테이징은 상품 유형 게시의 영향을 받지 않습니다.
    assert await products.count_staging(db_session) == 1

    response_products = await admin_client.post(f"{BASE_URL}/publish")
    assert response_products.status_code == 200
    assert response_products.json()["data"][0]["product_type_slug"] == "sneakers"

    production = await authorized_client.get(f"{TYPES_URL}/production")
    assert [t["slug"] for t in production.json()["data"]] == ["boots", "sneakers"]
    assert "state" not in production.json()["data"][0]
