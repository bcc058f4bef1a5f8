import json
from datetime import datetime, timezone

import httpx
import pytest

from clientflow.supabase_rest import SupabaseRest

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


class FakeBudgetStore:
    """In-memory stand-in for SupabaseBudgetStore."""

    def __init__(self, allocations=None, admins=None, alerts=None):
        self.allocations = allocations or []
        self.admins = admins or []
        self.alerts = alerts or []
        self.notifications = []
        self.scanned_for = None
        self.admin_lookups = 0
        self.fail_scan = False
        self.fail_insert_for = set()
        self.fail_notifications = False
        self.fail_admins = False
        self.reject_inserts = False

    def fetch_live_allocations(self, today):
        self.scanned_for = today
        if self.fail_scan:
            raise httpx.ConnectError("store unreachable")
        return list(self.allocations)

    def find_recent_alert(self, client_id, service_id, alert_type, since):
        for alert in self.alerts:
            if (alert["client_id"], alert["service_id"], alert["alert_type"]) == (client_id, service_id, alert_type) \
                    and alert["created_at"] >= since:
                return alert
        return None

    def insert_alert(self, alert):
        if alert["client_id"] in self.fail_insert_for:
            raise httpx.HTTPStatusError(
                "insert failed",
                request=httpx.Request("POST", "http://store/rest/v1/budget_alerts"),
                response=httpx.Response(500),
            )
        if self.reject_inserts:
            return None
        row = dict(alert, id=f"alert-{len(self.alerts) + 1}", created_at=NOW)
        self.alerts.append(row)
        return row

    def list_active_admins(self):
        self.admin_lookups += 1
        if self.fail_admins:
            raise httpx.ConnectError("profiles unreachable")
        return [
            {"id": a["id"]} for a in self.admins
            if a.get("role") == "admin" and a.get("is_active") and a.get("deleted_at") is None
        ]

    def insert_notifications(self, rows):
        if self.fail_notifications:
            raise httpx.ReadTimeout("batch insert timed out")
        self.notifications.extend(rows)
        return len(rows)


def make_allocation(id, client_id="c1", service_id="s1", budget=1000, spent=0, client="Acme", service="SEO"):
    """A client_budgets row as PostgREST returns it, with embedded names."""
    return {
        "id": id, "client_id": client_id, "service_id": service_id,
        "monthly_budget": budget, "actual_spending": spent,
        "clients": {"name": client, "company": client}, "services": {"name": service},
    }


def make_admin(id, is_active=True, deleted_at=None, role="admin"):
    return {"id": id, "role": role, "is_active": is_active, "deleted_at": deleted_at}


class RecordingTransport:
    """httpx.MockTransport that records requests and answers from a route table."""

    def __init__(self, responses=None):
        self.requests: list[httpx.Request] = []
        # (method, path) -> httpx.Response or callable(request)
        self.responses = responses or {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        answer = self.responses.get(key)
        if callable(answer):
            return answer(request)
        if answer is not None:
            return answer
        if request.method == "POST":
            return httpx.Response(201, json=[])
        return httpx.Response(200, json=[])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def bodies(self, path: str) -> list:
        return [json.loads(r.content) for r in self.requests if r.url.path == path and r.content]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def rest(recorder):
    return SupabaseRest("https://proj.supabase.co", "service-key", transport=recorder.transport)
