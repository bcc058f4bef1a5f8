"""
notification_service.py — Outbound notifications
Sends transactional email through Resend (recording each attempt in
email_logs) or drops an in-app row into notifications for the UI to pick up.
"""

import logging
from datetime import datetime, timezone

from clientflow import config
from clientflow.models.notification import NotificationRequest, TemplateEmailRequest
from clientflow.resend_client import ResendClient
from clientflow.services.email_templates import render_template
from clientflow.supabase_rest import SupabaseRest

logger = logging.getLogger(__name__)


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class NotificationService:
    @staticmethod
    def log_email(rest: SupabaseRest, recipient: str, subject: str, status: str,
                  template_id: str = None, error_message: str = None) -> None:
        """Best effort: a failed log write is reported but never raised."""
        try:
            rest.insert_many("email_logs", [{
                "recipient_email": recipient,
                "subject": subject,
                "template_id": template_id,
                "status": status,
                "sent_at": _utcnow_iso(),
                "error_message": error_message,
            }])
        except Exception:
            logger.exception("Failed to log email to database")

    @staticmethod
    def send(rest: SupabaseRest, resend: ResendClient | None, request: NotificationRequest) -> dict:
        """Deliver a single notification. Errors propagate to the caller."""
        if request.type == "email":
            if resend is None:
                raise ValueError("RESEND_API_KEY must be set to send email")
            result = resend.send(
                config.EMAIL_FROM,
                request.to,
                request.subject,
                request.html or f"<p>{request.message}</p>",
                text=request.message,
            )
            NotificationService.log_email(rest, request.to, request.subject, "sent", template_id=request.template_id)
            logger.info("Email sent to %s (%s)", request.to, result.get("id"))
            return {"success": True, "message": "Email sent successfully", "id": result.get("id")}

        rest.insert_many("notifications", [{
            "user_id": request.to,
            "title": request.subject,
            "message": request.message,
            "type": "system",
            "is_read": False,
            "created_at": _utcnow_iso(),
        }])
        logger.info("System notification created for user %s", request.to)
        return {"success": True, "message": "Notification created"}

    @staticmethod
    def send_template(resend: ResendClient | None, request: TemplateEmailRequest) -> tuple[int, dict]:
        """
        Render and send a templated email.
        Returns (status_code, body); Resend failures propagate.
        """
        if not request.to or not request.template:
            return 400, {"error": "Missing required fields: to, template"}

        content = render_template(request.template, request.data)
        if content is None:
            return 400, {"error": "Invalid template type"}

        if resend is None:
            logger.info("Email would be sent: to=%s subject=%s template=%s", request.to, content["subject"], request.template)
            return 200, {
                "success": True,
                "message": "Email logged (RESEND_API_KEY not configured)",
                "data": content,
            }

        result = resend.send(config.TEMPLATE_EMAIL_FROM, request.to, content["subject"], content["html"])
        logger.info("Template email %s sent to %s", request.template, request.to)
        return 200, {"success": True, "messageId": result.get("id")}
