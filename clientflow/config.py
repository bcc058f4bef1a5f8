import os
from dotenv import load_dotenv

load_dotenv()

# --- Supabase Configuration ---
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")

# --- HTTP ---
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# --- Email (Resend) ---
RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
EMAIL_FROM = os.getenv("EMAIL_FROM", "ClientFlow <noreply@clientflow.app>")
TEMPLATE_EMAIL_FROM = os.getenv("TEMPLATE_EMAIL_FROM", "ClientFlow <notifications@clientflow.app>")
EMAIL_ERROR_RECIPIENT = os.getenv("EMAIL_ERROR_RECIPIENT", "error@clientflow.app")

# --- Budget alerts ---
BUDGET_ALERT_DEDUP_HOURS = int(os.getenv("BUDGET_ALERT_DEDUP_HOURS", "24"))
BUDGET_CHECK_DEADLINE_SECONDS = float(os.getenv("BUDGET_CHECK_DEADLINE_SECONDS", "0"))  # 0 = no deadline
# e.g. "client_id,service_id,alert_type,alert_date" when a matching unique index exists
BUDGET_ALERT_CONFLICT_COLUMNS = os.getenv("BUDGET_ALERT_CONFLICT_COLUMNS", "").strip()

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
