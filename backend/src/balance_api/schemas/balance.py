"""Balance response schemas."""

from pydantic import BaseModel

from balance_api.schemas.envelope import SuccessResponse


class Balance(BaseModel):
    """Account balance with its ISO 4217 currency code."""

    model_config = {"from_attributes": True}

    balance: float
    currency: str


BalanceResponse = SuccessResponse[Balance]
