"""Credit API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from credit_app.application.dto import CreditCreateRequest, CreditSummary, CreditView
from credit_app.application.services import CreditService
from credit_app.core.dependencies import get_credit_service
from credit_app.presentation.schemas import (
    CreditCreateSchema,
    CreditSummarySchema,
    CreditViewSchema,
    ErrorResponseSchema,
    ID_MAX,
    ID_MIN,
)

credit_router = APIRouter(
    prefix="/credits",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request, unknown customer or credit"},
    },
)


def _to_view_schema(view: CreditView) -> CreditViewSchema:
    return CreditViewSchema(
        credit_code=view.credit_code,
        credit_value=view.credit_value,
        number_of_installment=view.number_of_installment,
        status=view.status,
        email_customer=view.email_customer,
        income_customer=view.income_customer,
    )


@credit_router.post(
    "",
    response_model=CreditViewSchema,
    status_code=201,
    summary="Request Credit",
    description="""
    Record a credit for an existing customer.

    The first installment may not fall more than one month from today.
    """,
)
async def create_credit(
    request: CreditCreateSchema,
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditViewSchema:
    dto = CreditCreateRequest(
        credit_value=request.credit_value,
        day_first_of_installment=request.day_first_of_installment,
        number_of_installments=request.number_of_installments,
        customer_id=request.customer_id,
    )

    credit = await credit_service.save(dto.to_entity())

    return _to_view_schema(CreditView.from_entity(credit))


@credit_router.get(
    "",
    response_model=list[CreditSummarySchema],
    summary="List Customer Credits",
)
async def list_credits(
    customer_id: Annotated[int, Query(alias="customerId", ge=ID_MIN, le=ID_MAX, description="Id of the owning customer")],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> list[CreditSummarySchema]:
    credits = await credit_service.find_all_by_customer(customer_id)

    return [
        CreditSummarySchema(
            credit_code=summary.credit_code,
            credit_value=summary.credit_value,
            number_of_installments=summary.number_of_installments,
        )
        for summary in (CreditSummary.from_entity(c) for c in credits)
    ]


@credit_router.get(
    "/{credit_code}",
    response_model=CreditViewSchema,
    summary="Get Credit",
    description="Retrieve a credit by its code, on behalf of the customer that owns it.",
)
async def get_credit(
    credit_code: Annotated[UUID, Path(description="Credit code")],
    customer_id: Annotated[int, Query(alias="customerId", ge=ID_MIN, le=ID_MAX, description="Id of the owning customer")],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditViewSchema:
    credit = await credit_service.find_by_credit_code(customer_id, credit_code)

    return _to_view_schema(CreditView.from_entity(credit))
