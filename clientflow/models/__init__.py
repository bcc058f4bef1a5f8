from clientflow.models.budget import BudgetAllocation, BudgetAlertDetail, BudgetCheckSummary
from clientflow.models.notification import NotificationRequest, EmailTemplateData, TemplateEmailRequest

__all__ = [
    "BudgetAllocation",
    "BudgetAlertDetail",
    "BudgetCheckSummary",
    "NotificationRequest",
    "EmailTemplateData",
    "TemplateEmailRequest",
]
