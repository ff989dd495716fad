"""Credit API endpoints."""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from credit_service.application.dto import (
    CreditCreatedResponse,
    CreditRequest,
    CreditView,
)
from credit_service.application.services import CreditService
from credit_service.core.dependencies import get_credit_service
from credit_service.core.metrics import (
    record_credit_created,
    track_credit_creation_latency,
)
from credit_service.presentation.schemas import (
    CreditCreatedSchema,
    CreditRequestSchema,
    CreditViewSchema,
    ErrorResponseSchema,
)

credit_router = APIRouter(
    prefix="/credits",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


def _to_schema(view: CreditView) -> CreditViewSchema:
    return CreditViewSchema(
        id=view.id,
        credit_code=view.credit_code,
        credit_value=float(view.credit_value),
        day_first_installment=view.day_first_installment,
        number_of_installments=view.number_of_installments,
        installment_value=float(view.installment_value),
        status=view.status,
        customer_id=view.customer_id,
    )


@credit_router.post(
    "",
    response_model=CreditCreatedSchema,
    status_code=201,
    summary="Register Credit",
    description="""Register a credit for an existing customer""",
    responses={
        201: {"description": "Credit saved"},
    },
)
async def create_credit(
    request: CreditRequestSchema,
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditCreatedSchema:
    """
    Register a credit.

    Returns a confirmation message together with the stored credit.
    """
    dto = CreditRequest(
        credit_value=request.credit_value,
        day_first_installment=request.day_first_installment,
        number_of_installments=request.number_of_installments,
        customer_id=request.customer_id,
    )

    with track_credit_creation_latency():
        credit = await credit_service.create(dto)

    record_credit_created(credit.status.value, credit.credit_value)

    response = CreditCreatedResponse.from_entity(credit)

    return CreditCreatedSchema(
        message=response.message,
        **_to_schema(response.credit).model_dump(),
    )


@credit_router.get(
    "",
    response_model=List[CreditViewSchema],
    summary="List Customer Credits",
    description="""
    Retrieve every credit of a customer.

    Credits are returned in the order they were registered.
    """,
    responses={
        200: {"description": "Credits retrieved successfully"},
    },
)
async def list_credits(
    customer_id: Annotated[
        int,
        Query(alias="customerId", description="Customer whose credits to list"),
    ],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> List[CreditViewSchema]:
    credits = await credit_service.find_all_by_customer(customer_id)

    return [_to_schema(CreditView.from_entity(credit)) for credit in credits]


@credit_router.get(
    "/{credit_id}",
    response_model=CreditViewSchema,
    summary="Get Credit",
    description="""
    Retrieve a credit by its ID.

    When customerId is given the credit must belong to that customer.
    """,
    responses={
        200: {"description": "Credit retrieved successfully"},
    },
)
async def get_credit(
    credit_id: Annotated[
        UUID,
        Path(description="UUID of the credit to retrieve"),
    ],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
    customer_id: Annotated[
        Optional[int],
        Query(alias="customerId", description="Expected owner of the credit"),
    ] = None,
) -> CreditViewSchema:
    credit = await credit_service.find_by_id(credit_id, customer_id)

    return _to_schema(CreditView.from_entity(credit))
