import os

# Configurações globais de ambiente
SLACK_TOKEN = os.getenv("SLACK_TOKEN")
SLACK_WEBHOOK_BASE_URL = os.getenv("SLACK_WEBHOOK_BASE_URL", "https://hooks.slack.com/services/")
SLACK_TIMEOUT_SECONDS = float(os.getenv("SLACK_TIMEOUT_SECONDS", "10"))
APP_PORT = int(os.getenv("APP_PORT", "7071"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Variante do schema do alerta do Azure Monitor: 'classic' | 'metric'
ALERT_SCHEMA = os.getenv("ALERT_SCHEMA", "classic").strip().lower()

# Rota mantida igual à da Azure Function original
ALERT_ROUTE = os.getenv("ALERT_ROUTE", "/api/MonitorAlert")

# Cores dos attachments do Slack
ACTIVATED_COLOR = os.getenv("ACTIVATED_COLOR", "#FF0000")
RESOLVED_COLOR = os.getenv("RESOLVED_COLOR", "#00FF00")
DEFAULT_COLOR = os.getenv("DEFAULT_COLOR", "#808080")

CHANNEL_PREFIX = "#"
PORTAL_LINK_LABEL = "View alert in Azure Portal"

# Respostas devolvidas ao chamador do webhook
MSG_CHANNEL_MISSING = "channel not specified in query"
MSG_TOKEN_MISSING = "Slack token not specified"
MSG_BODY_MISSING = "Unable to parse body as json"
MSG_SENT = "Message successfully sent to slack!"
MSG_FORMAT_FAILED = "Unable to format alert: missing field {path}"
MSG_SEND_FAILED = "Failed to send message to slack: {error}"
