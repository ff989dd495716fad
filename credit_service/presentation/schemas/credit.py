"""Credit-related Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CreditRequestSchema(BaseModel):
    """Schema for POST /credits request body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "creditValue": 260000.0,
                    "dayFirstInstallment": "2027-10-18",
                    "numberOfInstallments": 12,
                    "customerId": 1,
                }
            ]
        },
    )

    credit_value: Decimal = Field(
        ...,
        alias="creditValue",
        description="Total value of the credit, must be positive",
        examples=[260000.0],
    )
    day_first_installment: date = Field(
        ...,
        alias="dayFirstInstallment",
        description="Due date of the first installment, must be in the future",
        examples=["2027-10-18"],
    )
    number_of_installments: int = Field(
        ...,
        alias="numberOfInstallments",
        description="Number of installments, must be positive",
        examples=[12],
    )
    customer_id: int = Field(
        ...,
        alias="customerId",
        description="ID of an existing customer",
        examples=[1],
    )


class CreditViewSchema(BaseModel):
    """Schema for a credit in GET /credits responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        description="UUID of the credit",
    )
    credit_code: str = Field(
        ...,
        alias="creditCode",
        description="Business-facing credit code",
    )
    credit_value: float = Field(
        ...,
        alias="creditValue",
        description="Total value of the credit",
        examples=[260000.0],
    )
    day_first_installment: date = Field(
        ...,
        alias="dayFirstInstallment",
        description="Due date of the first installment (YYYY-MM-DD)",
    )
    number_of_installments: int = Field(
        ...,
        gt=0,
        alias="numberOfInstallments",
        description="Number of installments",
    )
    installment_value: float = Field(
        ...,
        alias="installmentValue",
        description="Value of each installment",
        examples=[21666.67],
    )
    status: str = Field(
        ...,
        description="Credit status",
        examples=["IN_PROGRESS"],
    )
    customer_id: int = Field(
        ...,
        alias="customerId",
        description="Customer who owns this credit",
    )


class CreditCreatedSchema(CreditViewSchema):
    """Schema for POST /credits response body."""

    message: str = Field(
        ...,
        description="Confirmation text",
        examples=["Credit 550e8400-e29b-41d4-a716-446655440000 - Customer 1 saved!"],
    )
