"""
resend_client.py — Transactional email through the Resend HTTP API.
"""
import httpx

from clientflow import config


class EmailSendError(Exception):
    pass


class ResendClient:
    def __init__(self, api_key: str, url: str = "https://api.resend.com/emails", timeout: float = 10,
                 transport: httpx.BaseTransport = None):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def send(self, sender: str, to: str, subject: str, html: str, text: str = None) -> dict:
        """Send one email. Returns Resend's JSON body (contains the message id)."""
        payload = {"from": sender, "to": [to], "subject": subject, "html": html}
        if text is not None:
            payload["text"] = text

        headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            resp = client.post(self.url, json=payload, headers=headers)
            if resp.is_error:
                raise EmailSendError(f"Email service error: {resp.status_code} {resp.text}")
            return resp.json()


def get_resend() -> ResendClient | None:
    """Resend client, or None when RESEND_API_KEY is not configured."""
    if not config.RESEND_API_KEY:
        return None
    return ResendClient(config.RESEND_API_KEY, url=config.RESEND_API_URL, timeout=config.HTTP_TIMEOUT_SECONDS)
