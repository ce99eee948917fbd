from .constants import PAYLOAD_STATUS_PAGE, INCIDENT_EMOJI, STATUS_PAGE_URL
from .detection import detect_payload_type
from .utils import (
    get_text,
    pick_first_text,
    get_dict,
    get_list,
    get_status_emoji,
    convert_bold_markdown,
)


def _mrkdwn_field(label, value):
    return {"type": "mrkdwn", "text": f"*{label}:*\n{value}"}


def _header_block(text):
    return {
        "type": "header",
        "text": {"type": "plain_text", "text": text, "emoji": True},
    }


def build_status_page_button(status_page_url):
    return {
        "type": "actions",
        "elements": [
            {
                "type": "button",
                "text": {"type": "plain_text", "text": "View Status Page", "emoji": True},
                "url": status_page_url,
                "style": "primary",
            }
        ],
    }


def format_status_page_message(payload, status_page_url=STATUS_PAGE_URL):
    issue = get_dict(payload, 'issue')
    status_message = get_dict(payload, 'message')
    status_page_name = get_text(payload, 'status_page_name', 'Status Page')

    title = get_text(issue, 'title', 'Status Update')
    message_text = get_text(status_message, 'text', '')
    status = get_text(status_message, 'status') or get_text(issue, 'currentState', 'Unknown')
    affected_components = get_list(issue, 'affected_components')

    blocks = [
        _header_block(f"{get_status_emoji(status)} {status}"),
        {
            "type": "section",
            "fields": [
                _mrkdwn_field("Issue", title),
                _mrkdwn_field("Status Page", status_page_name),
            ],
        },
    ]

    if affected_components:
        component_names = ", ".join(get_text(c, 'name', 'Unknown') for c in affected_components)
        blocks.append({
            "type": "section",
            "fields": [_mrkdwn_field("Affected Components", component_names)],
        })

    if message_text:
        blocks.append({
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"*Update:*\n{convert_bold_markdown(message_text)}"},
        })

    blocks.append(build_status_page_button(status_page_url))

    return {
        "channel": None,
        "text": f"{status_page_name}: {title} - {status}",
        "blocks": blocks,
    }


def format_incident_message(payload, status_page_url=STATUS_PAGE_URL):
    incident = get_dict(payload, 'incident')
    service = get_dict(payload, 'service')
    team = get_dict(payload, 'team')
    event_type = pick_first_text(payload, ['event_type', 'eventName'], 'Unknown Event')

    message = get_text(incident, 'message', 'New Incident')
    description = get_text(incident, 'description', '')
    status = get_text(incident, 'status', 'Unknown')
    severity = pick_first_text(incident, ['severity', 'priority'], 'N/A')
    alert_source = get_text(incident, 'alert_source', 'N/A')

    blocks = [
        _header_block(f"{INCIDENT_EMOJI} {message}"),
        {
            "type": "section",
            "fields": [
                _mrkdwn_field("Event Type", event_type),
                _mrkdwn_field("Status", status),
                _mrkdwn_field("Severity", severity),
                _mrkdwn_field("Source", alert_source),
            ],
        },
    ]

    service_name = get_text(service, 'name')
    team_name = get_text(team, 'name')
    if service_name or team_name:
        fields = []
        if service_name:
            fields.append(_mrkdwn_field("Service", service_name))
        if team_name:
            fields.append(_mrkdwn_field("Team", team_name))
        blocks.append({"type": "section", "fields": fields})

    if description:
        blocks.append({
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"*Description:*\n{description}"},
        })

    blocks.append(build_status_page_button(status_page_url))

    return {
        "channel": None,
        "text": f"Squadcast Alert: {message}",
        "blocks": blocks,
    }


def format_slack_message(payload, status_page_url=STATUS_PAGE_URL):
    """Monta a mensagem Block Kit conforme o tipo do payload.

    O canal fica vazio; quem chama injeta o canal já normalizado.
    """
    if not isinstance(payload, dict):
        payload = {}
    if detect_payload_type(payload) == PAYLOAD_STATUS_PAGE:
        return format_status_page_message(payload, status_page_url)
    return format_incident_message(payload, status_page_url)
