import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from clientflow import config
from clientflow.models.notification import NotificationRequest, TemplateEmailRequest
from clientflow.resend_client import get_resend
from clientflow.services.notification_service import NotificationService
from clientflow.supabase_rest import get_rest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/notifications", tags=["Notifications"])


@router.options("/send")
@router.options("/email")
def preflight():
    return Response(status_code=200)


@router.post("/send")
def send_notification(body: NotificationRequest):
    """Send an email through Resend, or create an in-app notification."""
    try:
        return NotificationService.send(get_rest(), get_resend(), body)
    except Exception as e:
        logger.exception("Notification send failed")
        if config.SUPABASE_URL and config.SUPABASE_SERVICE_ROLE_KEY:
            NotificationService.log_email(
                get_rest(), config.EMAIL_ERROR_RECIPIENT, "Email send failure", "failed", error_message=str(e),
            )
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})


@router.post("/email")
def send_template_email(body: TemplateEmailRequest):
    """Render one of the email templates and send it."""
    try:
        status_code, content = NotificationService.send_template(get_resend(), body)
        return JSONResponse(status_code=status_code, content=content)
    except Exception as e:
        logger.exception("Error sending email")
        return JSONResponse(status_code=500, content={"error": str(e)})
