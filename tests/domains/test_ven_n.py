# tests/domains/test_ven_n.py

"""
'ven' 도메인 (공급업체 관리) API 엔드포인트에 대한 통합 테스트입니다.
"""

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.domains.ven import models as ven_models
from shop_admin.domains.ven.crud import suppliers

BASE_URL = "/api/v1/ven/suppliers"


@pytest.mark.asyncio
async def test_create_staging_supplier(editor_client: AsyncClient):
    response = await editor_client.post(
        f"{BASE_URL}/staging",
        json={"name": "Acme Trading", "code": "ACME", "email": "sales@acme.com", "phone": "02-123-4567"},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["code"] == "ACME"
    assert data["email"] == "sales@acme.com"
    assert data["state"] == "active"


@pytest.mark.asyncio
async def test_create_staging_supplier_invalid_email(editor_client: AsyncClient):
    response = await editor_client.post(
        f"{BASE_URL}/staging",
        json={"name": "Acme Trading", "code": "ACME", "email": "not-an-email"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_staging_supplier_duplicate_code(editor_client: AsyncClient):
    await editor_client.post(f"{BASE_URL}/staging", json={"name": "Acme", "code": "ACME"})

    response = await editor_client.post(f"{BASE_URL}/staging", json={"name": "Acme 2", "code": "ACME"})

    assert response.status_code == 400
    assert response.json()["error"] == "code 'ACME' is already used in staging"


@pytest.mark.asyncio
async def test_list_staging_suppliers_sorted_by_name(editor_client: AsyncClient):
    await editor_client.post(f"{BASE_URL}/staging", json={"name": "Zeta", "code": "Z"})
    await editor_client.post(f"{BASE_URL}/staging", json={"name": "Alpha", "code": "A"})

    response = await editor_client.get(f"{BASE_URL}/staging")

    assert [s["name"] for s in response.json()["data"]] == ["Alpha", "Zeta"]


@pytest.mark.asyncio
async def test_publish_suppliers_replaces_production(
    editor_client: AsyncClient,
    admin_client: AsyncClient,
    db_session: AsyncSession,
):
    db_session.add(ven_models.Supplier(name="Gone Ltd", code="GONE"))
    await db_session.commit()

    await editor_client.put(
        f"{BASE_URL}/staging",
        json={
            "items": [{"name": "Acme", "code": "ACME", "notes": "primary"}],
            "removed": [{"name": "Gone Ltd", "code": "GONE"}],
        },
    )

    response = await admin_client.post(f"{BASE_URL}/publish")

    assert response.status_code == 200
    assert response.json()["count"] == 1

    production = await suppliers.read_production(db_session)
    assert [(s.code, s.notes) for s in production] == [("ACME", "primary")]
    assert await suppliers.count_staging(db_session) == 0


@pytest.mark.asyncio
async def test_publish_suppliers_empty_staging(admin_client: AsyncClient):
    response = await admin_client.post(f"{BASE_URL}/publish")

    assert response.status_code == 400
    assert response.json()["error"] == "No staging suppliers to publish"


@pytest.mark.asyncio
async def test_read_production_supplier(authorized_client: AsyncClient, db_session: AsyncSession):
    supplier = ven_models.Supplier(name="Acme", code="ACME", email="sales@acme.com")
    db_session.add(supplier)
    await db_session.commit()
    await db_session.refresh(supplier)

    response = await authorized_client.get(f"{BASE_URL}/production/{supplier.id}")

    assert response.status_code == 200
    assert response.json()["data"]["code"] == "ACME"
