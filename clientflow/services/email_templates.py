"""
email_templates.py — HTML bodies for the transactional emails.
Each template takes the request data and returns {"subject": ..., "html": ...}.
"""

from html import escape

from clientflow.models.notification import EmailTemplateData

FOOTER = '<p style="color: #6b7280; font-size: 14px; margin-top: 20px;">This is an automated notification from ClientFlow.</p>'


def _e(value: str | None, default: str = "") -> str:
    return escape(value) if value else default


def _details(data: EmailTemplateData) -> str:
    return (
        f'<p style="margin: 5px 0;"><strong>Client:</strong> {_e(data.clientName)}</p>'
        f'<p style="margin: 5px 0;"><strong>Service:</strong> {_e(data.serviceName)}</p>'
        f'<p style="margin: 5px 0;"><strong>Week of:</strong> {_e(data.weekDate)}</p>'
    )


def _button(link: str | None, label: str, color: str) -> str:
    if not link:
        return ""
    return (
        f'<p><a href="{escape(link, quote=True)}" style="background: {color}; color: white; padding: 10px 20px; '
        f'text-decoration: none; border-radius: 5px; display: inline-block; margin-top: 10px;">{label}</a></p>'
    )


def _feedback(feedback: str | None, label: str, background: str, border: str) -> str:
    if not feedback:
        return ""
    return (
        f'<div style="background: {background}; padding: 15px; border-radius: 8px; margin: 20px 0; border-left: 4px solid {border};">'
        f'<p style="margin: 0;"><strong>{label}:</strong></p>'
        f'<p style="margin: 10px 0 0 0;">{escape(feedback)}</p>'
        f'</div>'
    )


def report_submitted(data: EmailTemplateData) -> dict:
    html = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<h2 style="color: #2563eb;">New Weekly Report Submitted</h2>'
        f'<p>Hello {_e(data.recipientName, "Admin")},</p>'
        f'<p><strong>{_e(data.employeeName)}</strong> has submitted a new weekly report for review.</p>'
        f'<div style="background: #f3f4f6; padding: 15px; border-radius: 8px; margin: 20px 0;">{_details(data)}</div>'
        '<p>Please log in to review and approve this report.</p>'
        f'{_button(data.reportLink, "View Report", "#2563eb")}'
        f'{FOOTER}'
        '</div>'
    )
    return {"subject": f"New Report Submitted - {data.clientName or ''}", "html": html}


def report_approved(data: EmailTemplateData) -> dict:
    html = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<div style="background: #10b981; color: white; padding: 20px; border-radius: 8px 8px 0 0;">'
        '<h2 style="margin: 0;">Report Approved!</h2></div>'
        '<div style="background: #f9fafb; padding: 20px; border-radius: 0 0 8px 8px;">'
        f'<p>Hello {_e(data.recipientName, "Team Member")},</p>'
        '<p>Great news! Your weekly report has been approved.</p>'
        f'<div style="background: white; padding: 15px; border-radius: 8px; margin: 20px 0;">{_details(data)}</div>'
        f'{_feedback(data.feedback, "Feedback", "#dbeafe", "#2563eb")}'
        '<p>Keep up the excellent work!</p>'
        '</div>'
        f'{FOOTER}'
        '</div>'
    )
    return {"subject": f"Report Approved - {data.clientName or ''}", "html": html}


def report_revision(data: EmailTemplateData) -> dict:
    html = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<div style="background: #f59e0b; color: white; padding: 20px; border-radius: 8px 8px 0 0;">'
        '<h2 style="margin: 0;">Revision Requested</h2></div>'
        '<div style="background: #fffbeb; padding: 20px; border-radius: 0 0 8px 8px;">'
        f'<p>Hello {_e(data.recipientName, "Team Member")},</p>'
        '<p>Your weekly report requires some revisions before it can be approved.</p>'
        f'<div style="background: white; padding: 15px; border-radius: 8px; margin: 20px 0;">{_details(data)}</div>'
        f'{_feedback(data.feedback, "Requested Changes", "#fef3c7", "#f59e0b")}'
        '<p>Please log in to make the necessary updates and resubmit your report.</p>'
        f'{_button(data.reportLink, "Edit Report", "#f59e0b")}'
        '</div>'
        f'{FOOTER}'
        '</div>'
    )
    return {"subject": f"Revision Requested - {data.clientName or ''}", "html": html}


def budget_alert(data: EmailTemplateData) -> dict:
    html = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<div style="background: #ef4444; color: white; padding: 20px; border-radius: 8px 8px 0 0;">'
        '<h2 style="margin: 0;">Budget Alert!</h2></div>'
        '<div style="background: #fef2f2; padding: 20px; border-radius: 0 0 8px 8px;">'
        f'<p>Hello {_e(data.recipientName, "Admin")},</p>'
        '<p>A client budget has exceeded 80% of the allocated amount.</p>'
        '<div style="background: white; padding: 15px; border-radius: 8px; margin: 20px 0;">'
        f'<p style="margin: 5px 0;"><strong>Client:</strong> {_e(data.clientName)}</p>'
        f'<p style="margin: 5px 0;"><strong>Service:</strong> {_e(data.serviceName)}</p>'
        f'<p style="margin: 5px 0;"><strong>Budget:</strong> {_e(data.budgetAmount)}</p>'
        f'<p style="margin: 5px 0;"><strong>Spent:</strong> {_e(data.spentAmount)}</p>'
        '</div>'
        '<p>Please review the budget allocation and adjust as necessary.</p>'
        '<p style="color: #dc2626; font-weight: bold;">Action may be required to prevent budget overrun.</p>'
        '</div>'
        f'{FOOTER}'
        '</div>'
    )
    return {"subject": f"Budget Alert - {data.clientName or ''}", "html": html}


TEMPLATES = {
    "report_submitted": report_submitted,
    "report_approved": report_approved,
    "report_revision": report_revision,
    "budget_alert": budget_alert,
}


def render_template(name: str, data: EmailTemplateData) -> dict | None:
    """Render a named template, or None if the name is unknown."""
    template = TEMPLATES.get(name)
    if template is None:
        return None
    return template(data)
