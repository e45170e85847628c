"""Customer API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from credit_app.application.dto import (
    CustomerCreateRequest,
    CustomerUpdateRequest,
    CustomerView,
)
from credit_app.application.services import CustomerService
from credit_app.core.dependencies import get_customer_service
from credit_app.presentation.schemas import (
    CustomerCreateSchema,
    CustomerUpdateSchema,
    CustomerViewSchema,
    ErrorResponseSchema,
    ID_MAX,
    ID_MIN,
)

customer_router = APIRouter(
    prefix="/customers",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request or unknown customer"},
    },
)


def _to_schema(view: CustomerView) -> CustomerViewSchema:
    return CustomerViewSchema(
        id=view.id,
        first_name=view.first_name,
        last_name=view.last_name,
        cpf=view.cpf,
        email=view.email,
        income=view.income,
        zip_code=view.zip_code,
        street=view.street,
    )


@customer_router.post(
    "",
    response_model=CustomerViewSchema,
    status_code=201,
    summary="Register Customer",
    responses={
        201: {"description": "Customer registered"},
        409: {"model": ErrorResponseSchema, "description": "CPF or email already registered"},
    },
)
async def create_customer(
    request: CustomerCreateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerViewSchema:
    """
    Register a new customer.

    The password is stored hashed and never returned.
    """
    dto = CustomerCreateRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        cpf=request.cpf,
        email=str(request.email),
        password=request.password,
        zip_code=request.zip_code,
        street=request.street,
        income=request.income,
    )

    customer = await customer_service.save(dto.to_entity())

    return _to_schema(CustomerView.from_entity(customer))


@customer_router.get(
    "/{customer_id}",
    response_model=CustomerViewSchema,
    summary="Get Customer",
)
async def get_customer(
    customer_id: Annotated[int, Path(ge=ID_MIN, le=ID_MAX, description="Id of the customer")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerViewSchema:
    customer = await customer_service.find_by_id(customer_id)

    return _to_schema(CustomerView.from_entity(customer))


@customer_router.patch(
    "",
    response_model=CustomerViewSchema,
    summary="Update Customer",
    description="Overwrite name, income and address of a customer.",
)
async def update_customer(
    customer_id: Annotated[int, Query(alias="customerId", ge=ID_MIN, le=ID_MAX, description="Id of the customer")],
    request: CustomerUpdateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerViewSchema:
    patch = CustomerUpdateRequest(
        first_name=request.first_name,
        last_name=request.last_name,
        income=request.income,
        zip_code=request.zip_code,
        street=request.street,
    )

    customer = await customer_service.update(customer_id, patch)

    return _to_schema(CustomerView.from_entity(customer))


@customer_router.delete(
    "/{customer_id}",
    status_code=204,
    summary="Delete Customer",
    description="Delete a customer together with all of its credits.",
)
async def delete_customer(
    customer_id: Annotated[int, Path(ge=ID_MIN, le=ID_MAX, description="Id of the customer")],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> Response:
    await customer_service.delete(customer_id)

    return Response(status_code=204)
