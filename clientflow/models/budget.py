from typing import Optional

from pydantic import BaseModel


class BudgetAllocation(BaseModel):
    """A live client_budgets row with the embedded client and service names."""

    id: str
    client_id: str
    service_id: str
    monthly_budget: float = 0
    actual_spending: float = 0
    client_name: str = ""
    service_name: str = ""

    @classmethod
    def from_row(cls, row: dict) -> "BudgetAllocation":
        client = row.get("clients") or {}
        service = row.get("services") or {}
        return cls(
            id=str(row["id"]),
            client_id=str(row["client_id"]),
            service_id=str(row["service_id"]),
            monthly_budget=row.get("monthly_budget") or 0,
            actual_spending=row.get("actual_spending") or 0,
            client_name=client.get("company") or client.get("name") or "",
            service_name=service.get("name") or "",
        )


class BudgetAlertDetail(BaseModel):
    client_id: str
    service_id: str
    monthly_budget: float
    actual_spending: float
    utilization: float
    alert_level: str  # warning/critical/exceeded


class BudgetCheckSummary(BaseModel):
    success: bool = True
    checked: int = 0
    alerts: int = 0
    notifications_created: int = 0
    details: list[BudgetAlertDetail] = []
    alerts_created: int = 0
    duplicates_skipped: int = 0
    failed: list[str] = []
    unprocessed: list[str] = []
    timed_out: bool = False
    partial: bool = False
    notification_error: Optional[str] = None
