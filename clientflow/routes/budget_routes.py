import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from clientflow import config
from clientflow.supabase_rest import get_rest
from clientflow.services.budget_store import SupabaseBudgetStore
from clientflow.services.budget_service import BudgetAlertService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/budgets", tags=["Budgets"])


def get_budget_store() -> SupabaseBudgetStore:
    return SupabaseBudgetStore(get_rest(), conflict_columns=config.BUDGET_ALERT_CONFLICT_COLUMNS)


@router.api_route("/check", methods=["GET", "POST", "OPTIONS"])
def check_budgets(request: Request, now: Optional[datetime] = None):
    """Scheduler entry point: evaluate every live budget and raise alerts."""
    if request.method == "OPTIONS":
        return Response(status_code=200)

    try:
        store = get_budget_store()
        summary = BudgetAlertService.check_budgets(store, now=now)
        return summary.model_dump()
    except Exception as e:
        logger.exception("Error checking budgets")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e) or "Unknown error occurred"},
        )
