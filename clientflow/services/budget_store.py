"""
budget_store.py — Supabase reads and writes used by the budget alert check.
"""

from datetime import date, datetime

from clientflow.supabase_rest import SupabaseRest

ALLOCATION_COLUMNS = (
    "id,client_id,service_id,monthly_budget,actual_spending,"
    "clients!inner(name,company),services!inner(name)"
)


class SupabaseBudgetStore:
    def __init__(self, rest: SupabaseRest, conflict_columns: str = ""):
        self.rest = rest
        self.conflict_columns = conflict_columns

    def fetch_live_allocations(self, today: date) -> list[dict]:
        """Raw rows; each is parsed with BudgetAllocation.from_row by the caller."""
        return self.rest.select(
            "client_budgets",
            columns=ALLOCATION_COLUMNS,
            where=[("deleted_at", "is.null"), ("end_date", f"gte.{today.isoformat()}")],
        )

    def find_recent_alert(self, client_id: str, service_id: str, alert_type: str, since: datetime) -> dict | None:
        rows = self.rest.select(
            "budget_alerts",
            filters={"client_id": client_id, "service_id": service_id, "alert_type": alert_type},
            columns="id",
            where=[("created_at", f"gte.{since.isoformat()}")],
            limit=1,
        )
        return rows[0] if rows else None

    def insert_alert(self, alert: dict) -> dict | None:
        """Returns the created row, or None when the unique constraint swallowed it."""
        if not self.conflict_columns:
            alert = {k: v for k, v in alert.items() if k != "alert_date"}
            return self.rest.insert("budget_alerts", alert) or {"id": None}

        row = self.rest.insert("budget_alerts", alert, on_conflict=self.conflict_columns)
        return row or None

    def list_active_admins(self) -> list[dict]:
        return self.rest.select(
            "profiles",
            filters={"role": "admin", "is_active": "true"},
            columns="id",
            where=[("deleted_at", "is.null")],
        )

    def insert_notifications(self, rows: list[dict]) -> int:
        return self.rest.insert_many("notifications", rows)
