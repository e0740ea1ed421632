# tests/domains/test_tax_n.py

"""
'tax' 도메인 API 엔드포인트에 대한 통합 테스트입니다.
세금 설정과 세금 규칙은 서로 독립적으로 게시되는지 확인합니다.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.domains.tax import models as tax_models
from shop_admin.domains.tax.crud import tax_rules, tax_settings

SETTINGS_URL = "/api/v1/tax/settings"
RULES_URL = "/api/v1/tax/rules"


@pytest.mark.asyncio
async def test_create_staging_tax_setting(editor_client: AsyncClient):
    response = await editor_client.post(
        f"{SETTINGS_URL}/staging",
        json={"description": "GST", "rate_percent": "10", "is_inclusive": True, "is_gst": True},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert Decimal(data["rate_percent"]) == Decimal("10")
    assert data["is_gst"] is True
    assert data["state"] == "active"


@pytest.mark.asyncio
async def test_create_tax_setting_rate_out_of_range(editor_client: AsyncClient):
    response = await editor_client.post(f"{SETTINGS_URL}/staging", json={"rate_percent": "120"})
    assert response.status_code == 422

    response_negative = await editor_client.post(f"{SETTINGS_URL}/staging", json={"rate_percent": "-1"})
    assert response_negative.status_code == 422


@pytest.mark.asyncio
async def test_tax_rates_without_natural_key_allow_duplicates(editor_client: AsyncClient):
    payload = {"description": "GST", "rate_percent": "10"}
    first = await editor_client.post(f"{RULES_URL}/staging", json=payload)
    second = await editor_client.post(f"{RULES_URL}/staging", json=payload)

    assert first.status_code == 201
    assert second.status_code == 201


@pytest.mark.asyncio
async def test_publish_tax_settings_skips_removed(
    editor_client: AsyncClient,
    admin_client: AsyncClient,
    db_session: AsyncSession,
):
    keep = await editor_client.post(f"{SETTINGS_URL}/staging", json={"description": "GST", "rate_percent": "10", "is_gst": True})
    drop = await editor_client.post(f"{SETTINGS_URL}/staging", json={"description": "Old VAT", "rate_percent": "12.5"})
    await editor_client.delete(f"{SETTINGS_URL}/staging/{drop.json()['data']['id']}")
    assert keep.status_code == 201

    response = await admin_client.post(f"{SETTINGS_URL}/publish")

    assert response.status_code == 200
    assert response.json()["message"] == "Published 1 tax settings"

    production = await tax_settings.read_production(db_session)
    assert [(s.description, s.is_gst) for s in production] == [("GST", True)]


@pytest.mark.asyncio
async def test_publish_tax_rules_independent_of_settings(admin_client: AsyncClient, db_session: AsyncSession):
    db_session.add_all([
        tax_models.TaxSetting(description="Live setting", rate_percent=Decimal("10")),
        tax_models.TaxRuleStaging(description="Reduced", rate_percent=Decimal("5")),
    ])
    await db_session.commit()

    response = await admin_client.post(f"{RULES_URL}/publish")
    assert response.status_code == 200

    rules = await tax_rules.read_production(db_session)
    assert [r.description for r in rules] == ["Reduced"]
    settings = await tax_settings.read_production(db_session)
    assert [s.description for s in settings] == ["Live setting"]

    response_settings = await admin_client.post(f"{SETTINGS_URL}/publish")
    assert response_settings.status_code == 400
    assert response_settings.json()["error"] == "No staging tax settings to publish"
