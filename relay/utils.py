import re

from .constants import STATUS_EMOJIS, CHANNEL_PREVIEW_LENGTH

_BOLD_PATTERN = re.compile(r'\*\*(.*?)\*\*')


def _is_meaningful(value):
    if value is None:
        return False
    if isinstance(value, (dict, list)):
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def get_text(mapping, key, default=None):
    """Lê ``mapping[key]`` como texto, devolvendo ``default`` se ausente ou vazio."""
    if not isinstance(mapping, dict):
        return default
    value = mapping.get(key)
    if not _is_meaningful(value):
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def pick_first_text(mapping, keys, default=None):
    for key in keys:
        value = get_text(mapping, key)
        if value is not None:
            return value
    return default


def get_dict(mapping, key):
    if not isinstance(mapping, dict):
        return {}
    value = mapping.get(key)
    return value if isinstance(value, dict) else {}


def get_list(mapping, key):
    if not isinstance(mapping, dict):
        return []
    value = mapping.get(key)
    return value if isinstance(value, list) else []


def get_status_emoji(status):
    lowered = (status or "").lower()
    if "resolved" in lowered or "operational" in lowered:
        return STATUS_EMOJIS["resolved"]
    if "identified" in lowered or "investigating" in lowered:
        return STATUS_EMOJIS["investigating"]
    if "monitoring" in lowered:
        return STATUS_EMOJIS["monitoring"]
    return STATUS_EMOJIS["default"]


def normalize_channel_id(channel_id):
    # Remove espaços e um único '#' inicial
    normalized = (channel_id or "").strip()
    if normalized.startswith("#"):
        normalized = normalized[1:]
    return normalized


def convert_bold_markdown(text):
    """Converte negrito markdown (**texto**) para o mrkdwn do Slack (*texto*)."""
    return _BOLD_PATTERN.sub(r'*\1*', text)


def build_channel_info(channel_id):
    if len(channel_id) > CHANNEL_PREVIEW_LENGTH:
        preview = f"{channel_id[:CHANNEL_PREVIEW_LENGTH]}..."
    else:
        preview = channel_id
    return {
        'is_channel_id': channel_id.startswith('C'),
        'length': len(channel_id),
        'preview': preview,
    }
