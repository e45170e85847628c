"""
Integration tests for the Credit API endpoints.

These tests verify:
1. POST /api/credits - Create a credit, including the installment date rule
2. GET /api/credits?customerId= - List a customer's credits
3. GET /api/credits/{creditCode}?customerId= - Retrieve one credit
"""

from datetime import date, timedelta
from uuid import UUID, uuid4

import pytest
from dateutil.relativedelta import relativedelta
from httpx import AsyncClient
from sqlalchemy import func, select
from structlog.testing import capture_logs

from credit_app.infrastructure.database import CreditModel


# =============================================================================
# POST /api/credits Tests
# =============================================================================

class TestCreateCredit:
    """Tests for POST /api/credits endpoint."""

    @pytest.mark.asyncio
    async def test_create_credit_returns_201(
        self,
        client: AsyncClient,
        customer: dict,
        credit_payload: dict,
    ):
        response = await client.post("/api/credits", json=credit_payload)

        assert response.status_code == 201

        data = response.json()
        assert UUID(data["creditCode"])
        assert data["creditValue"] == 1500.0
        assert data["numberOfInstallment"] == 1
        assert data["status"] == "IN_PROGRESS"
        assert data["emailCustomer"] == customer["email"]
        assert data["incomeCustomer"] == customer["income"]

    @pytest.mark.asyncio
    async def test_create_credit_persists_one_record(
        self,
        client: AsyncClient,
        session_factory,
        customer: dict,
        credit_payload: dict,
    ):
        await client.post("/api/credits", json=credit_payload)

        async with session_factory() as session:
            count = await session.scalar(select(func.count()).select_from(CreditModel))
            model = await session.scalar(select(CreditModel))

        assert count == 1
        assert model.customer_id == customer["id"]

    @pytest.mark.asyncio
    async def test_first_installment_one_month_ahead_is_accepted(
        self,
        client: AsyncClient,
        customer: dict,
        make_credit_payload,
    ):
        payload = make_credit_payload(
            day_first_of_installment=date.today() + relativedelta(months=1),
        )

        response = await client.post("/api/credits", json=payload)

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_first_installment_too_far_ahead_returns_400(
        self,
        client: AsyncClient,
        session_factory,
        customer: dict,
        make_credit_payload,
    ):
        payload = make_credit_payload(
            day_first_of_installment=date.today() + relativedelta(months=3),
        )

        response = await client.post("/api/credits", json=payload)

        assert response.status_code == 400

        data = response.json()
        assert data["title"] == "Bad Request! Consult the documentation"
        assert data["exception"].endswith("InvalidInstallmentDateException")
        assert data["details"][0]["message"] == "Invalid Date"

        async with session_factory() as session:
            count = await session.scalar(select(func.count()).select_from(CreditModel))
        assert count == 0

    @pytest.mark.asyncio
    async def test_unknown_customer_returns_400(
        self,
        client: AsyncClient,
        make_credit_payload,
    ):
        response = await client.post("/api/credits", json=make_credit_payload(customer_id=77))

        assert response.status_code == 400
        assert response.json()["details"][0]["message"] == "Id 77 not found"

    @pytest.mark.asyncio
    async def test_past_first_installment_returns_400(
        self,
        client: AsyncClient,
        customer: dict,
        make_credit_payload,
    ):
        payload = make_credit_payload(day_first_of_installment=date.today())

        response = await client.post("/api/credits", json=payload)

        assert response.status_code == 400
        assert any(
            d["field"] == "dayFirstOfInstallment" for d in response.json()["details"]
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("numberOfInstallments", 0),
            ("numberOfInstallments", 49),
            ("creditValue", 0),
            ("creditValue", -10.5),
            ("customerId", 9223372036854775808),
        ],
    )
    async def test_invalid_field_returns_400(
        self,
        client: AsyncClient,
        customer: dict,
        credit_payload: dict,
        field: str,
        value,
    ):
        credit_payload[field] = value

        response = await client.post("/api/credits", json=credit_payload)

        assert response.status_code == 400
        assert any(d["field"] == field for d in response.json()["details"])

    @pytest.mark.asyncio
    async def test_each_credit_gets_a_unique_code(
        self,
        client: AsyncClient,
        customer: dict,
        credit_payload: dict,
    ):
        first = await client.post("/api/credits", json=credit_payload)
        second = await client.post("/api/credits", json=credit_payload)

        assert first.json()["creditCode"] != second.json()["creditCode"]


# =============================================================================
# GET /api/credits Tests
# =============================================================================

class TestListCredits:
    """Tests for GET /api/credits?customerId= endpoint."""

    @pytest.mark.asyncio
    async def test_find_all_credits_by_customer_id(
        self,
        client: AsyncClient,
        customer: dict,
        make_credit_payload,
    ):
        await client.post("/api/credits", json=make_credit_payload(
            credit_value=1500.0,
            day_first_of_installment=date.today() + timedelta(days=10),
        ))
        await client.post("/api/credits", json=make_credit_payload(
            credit_value=2000.0,
            day_first_of_installment=date.today() + timedelta(days=15),
        ))

        response = await client.get(f"/api/credits?customerId={customer['id']}")

        assert response.status_code == 200

        data = response.json()
        assert len(data) == 2
        assert [c["creditValue"] for c in data] == [1500.0, 2000.0]
        for credit in data:
            assert UUID(credit["creditCode"])
            assert credit["numberOfInstallments"] == 1

    @pytest.mark.asyncio
    async def test_only_the_customers_credits_are_listed(
        self,
        client: AsyncClient,
        customer: dict,
        other_customer_payload: dict,
        make_credit_payload,
    ):
        other = (await client.post("/api/customers", json=other_customer_payload)).json()

        mine = await client.post("/api/credits", json=make_credit_payload(customer_id=customer["id"]))
        await client.post("/api/credits", json=make_credit_payload(customer_id=other["id"]))

        response = await client.get(f"/api/credits?customerId={customer['id']}")

        codes = [c["creditCode"] for c in response.json()]
        assert codes == [mine.json()["creditCode"]]

    @pytest.mark.asyncio
    async def test_no_credits_returns_empty_list(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/api/credits?customerId=12345")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_customer_id_outside_bigint_range_returns_400(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/api/credits?customerId=9223372036854775808")

        assert response.status_code == 400

        data = response.json()
        assert data["exception"].endswith("RequestValidationError")
        assert data["details"][0]["field"] == "customerId"


# =============================================================================
# GET /api/credits/{creditCode} Tests
# =============================================================================

class TestGetCredit:
    """Tests for GET /api/credits/{creditCode}?customerId= endpoint."""

    @pytest.mark.asyncio
    async def test_find_credit_by_code_and_customer_id(
        self,
        client: AsyncClient,
        customer: dict,
        make_credit_payload,
    ):
        created = await client.post("/api/credits", json=make_credit_payload(
            credit_value=1200.0,
            day_first_of_installment=date.today() + relativedelta(months=1),
        ))
        credit_code = created.json()["creditCode"]

        response = await client.get(
            f"/api/credits/{credit_code}?customerId={customer['id']}"
        )

        assert response.status_code == 200

        data = response.json()
        assert data["creditCode"] == credit_code
        assert data["creditValue"] == 1200.0
        assert data["numberOfInstallment"] == 1
        assert data["status"] == "IN_PROGRESS"
        assert data["emailCustomer"] == customer["email"]
        assert data["incomeCustomer"] == customer["income"]

    @pytest.mark.asyncio
    async def test_unknown_credit_code_returns_400(
        self,
        client: AsyncClient,
        customer: dict,
    ):
        credit_code = uuid4()

        response = await client.get(
            f"/api/credits/{credit_code}?customerId={customer['id']}"
        )

        assert response.status_code == 400

        data = response.json()
        assert data["exception"].endswith("CreditNotFoundException")
        assert data["details"][0]["message"] == f"Creditcode {credit_code} not found"

    @pytest.mark.asyncio
    async def test_credit_of_another_customer_returns_contact_admin(
        self,
        client: AsyncClient,
        customer: dict,
        other_customer_payload: dict,
        credit_payload: dict,
    ):
        other = (await client.post("/api/customers", json=other_customer_payload)).json()
        created = await client.post("/api/credits", json=credit_payload)
        credit_code = created.json()["creditCode"]

        response = await client.get(
            f"/api/credits/{credit_code}?customerId={other['id']}"
        )

        assert response.status_code == 400

        data = response.json()
        assert data["exception"].endswith("CreditOwnershipException")
        assert data["details"][0]["message"] == "Contact admin"

    @pytest.mark.asyncio
    async def test_credit_of_another_customer_is_logged_once(
        self,
        client: AsyncClient,
        customer: dict,
        other_customer_payload: dict,
        credit_payload: dict,
    ):
        other = (await client.post("/api/customers", json=other_customer_payload)).json()
        created = await client.post("/api/credits", json=credit_payload)
        credit_code = created.json()["creditCode"]

        with capture_logs() as logs:
            await client.get(f"/api/credits/{credit_code}?customerId={other['id']}")

        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert [entry["event"] for entry in errors] == ["credit_owner_mismatch"]
        assert errors[0]["owner_customer_id"] == customer["id"]
        assert errors[0]["requested_customer_id"] == other["id"]

    @pytest.mark.asyncio
    async def test_malformed_credit_code_returns_400(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/api/credits/not-a-uuid?customerId=1")

        assert response.status_code == 400
