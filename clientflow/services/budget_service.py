"""
budget_service.py — Budget Alert Evaluator
Scans live client budgets, classifies utilization against the warning /
critical / exceeded thresholds, records alerts that are not already inside the
dedup window and fans every new alert out to the active admins.
"""

import logging
import time
from datetime import datetime, timezone, timedelta

from clientflow import config
from clientflow.models.budget import BudgetAllocation, BudgetAlertDetail, BudgetCheckSummary

logger = logging.getLogger(__name__)

WARNING_THRESHOLD = 80.0
CRITICAL_THRESHOLD = 90.0
EXCEEDED_THRESHOLD = 100.0

NOTIFICATION_TYPE = "budget_alert"


def compute_utilization(monthly_budget: float, actual_spending: float) -> float:
    """Spending as a percentage of budget. A zero budget is never tracked."""
    if monthly_budget <= 0:
        return 0.0
    return actual_spending / monthly_budget * 100


def classify_alert_level(utilization: float) -> str | None:
    # first match wins, most severe first
    if utilization >= EXCEEDED_THRESHOLD:
        return "exceeded"
    if utilization >= CRITICAL_THRESHOLD:
        return "critical"
    if utilization >= WARNING_THRESHOLD:
        return "warning"
    return None


def build_alert_message(level: str, client_name: str, service_name: str, utilization: float) -> str:
    if level == "exceeded":
        return f"Budget exceeded for {client_name} - {service_name}. Utilization: {utilization:.1f}%"
    if level == "critical":
        return f"Critical: Budget at {utilization:.1f}% for {client_name} - {service_name}"
    return f"Warning: Budget at {utilization:.1f}% for {client_name} - {service_name}"


def notification_priority(level: str) -> str:
    return "high" if level == "exceeded" else "medium"


def build_admin_notifications(admins: list[dict], level: str, message: str) -> list[dict]:
    """One notification row per admin for a single new alert."""
    return [
        {
            "user_id": admin["id"],
            "title": f"Budget Alert: {level.upper()}",
            "message": message,
            "type": NOTIFICATION_TYPE,
            "priority": notification_priority(level),
        }
        for admin in admins
    ]


class BudgetAlertService:
    @staticmethod
    def check_budgets(
        store,
        now: datetime = None,
        deadline_seconds: float = None,
        dedup_hours: int = None,
        clock=time.monotonic,
    ) -> BudgetCheckSummary:
        """
        Run one evaluation pass over every live allocation.

        A failing allocation scan propagates to the caller. Failures while
        handling a single allocation are logged and collected in `failed`; the
        rest of the run continues. With a deadline, allocations not reached in
        time are listed in `unprocessed`.
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.astimezone(timezone.utc)
        if deadline_seconds is None:
            deadline_seconds = config.BUDGET_CHECK_DEADLINE_SECONDS
        if dedup_hours is None:
            dedup_hours = config.BUDGET_ALERT_DEDUP_HOURS

        started = clock()
        since = now - timedelta(hours=dedup_hours)
        logger.info("Budget check started at %s (dedup since %s)", now.isoformat(), since.isoformat())

        rows: list[dict] = store.fetch_live_allocations(now.date())
        summary = BudgetCheckSummary(checked=len(rows))
        notifications: list[dict] = []
        admins = None

        for index, row in enumerate(rows):
            if deadline_seconds and clock() - started >= deadline_seconds:
                summary.timed_out = True
                summary.unprocessed = [str(r.get("id")) for r in rows[index:]]
                logger.warning(
                    "Budget check deadline of %ss reached, %d allocations left unprocessed",
                    deadline_seconds, len(summary.unprocessed),
                )
                break

            budget_id = str(row.get("id"))
            try:
                allocation = BudgetAllocation.from_row(row)
                utilization = compute_utilization(allocation.monthly_budget, allocation.actual_spending)
                level = classify_alert_level(utilization)
                if level is None:
                    continue

                message = build_alert_message(level, allocation.client_name, allocation.service_name, utilization)
                summary.details.append(BudgetAlertDetail(
                    client_id=allocation.client_id,
                    service_id=allocation.service_id,
                    monthly_budget=allocation.monthly_budget,
                    actual_spending=allocation.actual_spending,
                    utilization=utilization,
                    alert_level=level,
                ))

                existing = store.find_recent_alert(allocation.client_id, allocation.service_id, level, since)
                if existing:
                    summary.duplicates_skipped += 1
                    logger.info("Skipping %s alert for budget %s: already alerted since %s", level, budget_id, since.isoformat())
                    continue

                # recipients first, so an alert is never stored without its fan-out
                if admins is None:
                    admins = store.list_active_admins()

                created = store.insert_alert({
                    "client_id": allocation.client_id,
                    "service_id": allocation.service_id,
                    "alert_type": level,
                    "threshold_percentage": utilization,
                    "message": message,
                    "alert_date": now.date().isoformat(),
                })
                if created is None:
                    summary.duplicates_skipped += 1
                    logger.info("Skipping %s alert for budget %s: rejected as duplicate by store", level, budget_id)
                    continue

                summary.alerts_created += 1
                logger.info("Created %s alert for budget %s (%.1f%%)", level, budget_id, utilization)
                notifications.extend(build_admin_notifications(admins, level, message))
            except Exception:
                logger.exception("Budget alert processing failed for budget %s", budget_id)
                summary.failed.append(budget_id)

        if notifications:
            try:
                summary.notifications_created = store.insert_notifications(notifications)
            except Exception as e:
                logger.exception("Failed to insert %d budget notifications", len(notifications))
                summary.notification_error = str(e)

        summary.alerts = len(summary.details)
        summary.partial = bool(summary.failed or summary.timed_out or summary.notification_error)
        logger.info(
            "Budget check done: checked=%d alerts=%d created=%d duplicates=%d notifications=%d failed=%d",
            summary.checked, summary.alerts, summary.alerts_created, summary.duplicates_skipped,
            summary.notifications_created, len(summary.failed),
        )
        return summary
