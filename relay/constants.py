import os

# Configurações globais de ambiente
SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
SLACK_CHANNEL_ID = os.getenv("SLACK_CHANNEL_ID")
SLACK_WORKFLOW_WEBHOOK_URL = os.getenv("SLACK_WORKFLOW_WEBHOOK_URL")
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Endpoints externos (sobrescrevíveis para testes/ambientes alternativos)
SLACK_API_URL = os.getenv("SLACK_API_URL", "https://slack.com/api/chat.postMessage")
STATUS_PAGE_URL = os.getenv("STATUS_PAGE_URL", "https://status.walr.com")

# Sem timeout explícito por padrão (vale o limite da plataforma)
_timeout_env = os.getenv("SLACK_TIMEOUT_SECONDS", "").strip()
SLACK_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None

# Qual handler responde em "/": 'bot' (API com token) | 'workflow' (webhook achatado)
RELAY_MODE = os.getenv("RELAY_MODE", "bot").strip().lower()
RELAY_MODES = ("bot", "workflow")

# Tipos de payload reconhecidos
PAYLOAD_INCIDENT = "incident"
PAYLOAD_STATUS_PAGE = "status_page"

STATUS_EMOJIS = {
    "resolved": "✅",
    "investigating": "🔍",
    "monitoring": "👀",
    "default": "⚠️",
}
INCIDENT_EMOJI = "🚨"

# Prévia do canal nas mensagens de erro
CHANNEL_PREVIEW_LENGTH = 10
# Prévia do corpo recebido quando o JSON é inválido
BODY_PREVIEW_LENGTH = 200


def default_config():
    return {
        "SLACK_BOT_TOKEN": SLACK_BOT_TOKEN,
        "SLACK_CHANNEL_ID": SLACK_CHANNEL_ID,
        "SLACK_WORKFLOW_WEBHOOK_URL": SLACK_WORKFLOW_WEBHOOK_URL,
        "SLACK_API_URL": SLACK_API_URL,
        "STATUS_PAGE_URL": STATUS_PAGE_URL,
        "SLACK_TIMEOUT_SECONDS": SLACK_TIMEOUT_SECONDS,
        "RELAY_MODE": RELAY_MODE,
        "DEBUG_MODE": DEBUG_MODE,
    }
