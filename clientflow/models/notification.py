from typing import Literal, Optional

from pydantic import BaseModel, Field


class NotificationRequest(BaseModel):
    to: str  # email address for type=email, user id for type=system
    subject: str
    message: str
    html: Optional[str] = None
    type: Literal["email", "system"] = "system"
    template_id: Optional[str] = None


class EmailTemplateData(BaseModel):
    recipientName: Optional[str] = None
    employeeName: Optional[str] = None
    clientName: Optional[str] = None
    serviceName: Optional[str] = None
    weekDate: Optional[str] = None
    feedback: Optional[str] = None
    budgetAmount: Optional[str] = None
    spentAmount: Optional[str] = None
    reportLink: Optional[str] = None


class TemplateEmailRequest(BaseModel):
    to: Optional[str] = None
    subject: Optional[str] = None
    template: Optional[str] = None
    data: EmailTemplateData = Field(default_factory=EmailTemplateData)
