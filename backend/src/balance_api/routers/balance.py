"""Balance endpoints."""

from fastapi import APIRouter

from balance_api.schemas.balance import Balance, BalanceResponse
from balance_api.schemas.envelope import build_success
from balance_api.services.balance import get_balance

router = APIRouter(tags=["balance"])


@router.get("/balance", response_model=BalanceResponse, status_code=200)
async def read_balance() -> BalanceResponse:
    """Return the account balance wrapped in the success envelope."""
    return build_success(Balance.model_validate(get_balance()))
