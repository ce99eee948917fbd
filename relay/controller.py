from flask import Flask, request, current_app
import json

from .constants import RELAY_MODES, BODY_PREVIEW_LENGTH, default_config
from .detection import detect_payload_type
from .flatten import flatten_payload
from .formatters import format_slack_message
from .services import send_slack_message, send_workflow_payload
from .utils import normalize_channel_id, build_channel_info


def build_slack_error_message(error, channel_info):
    message = f"Failed to post message to Slack: {error or 'Unknown error'}"
    if error == 'channel_not_found':
        id_format = 'ID format' if channel_info['is_channel_id'] else 'name format'
        message += f'. Channel configured: "{channel_info["preview"]}" ({id_format}). '
        message += (
            'Please verify: 1) The channel ID/name is correct, '
            '2) The bot is invited to the channel (if using channel name), '
            '3) The channel exists in your workspace. '
        )
        message += (
            'To get channel ID: Right-click channel → View channel details → Copy Channel ID. '
            f"Current value length: {channel_info['length']} characters."
        )
    return message


def _debug(message):
    if current_app.config.get('DEBUG_MODE'):
        print(f"[DEBUG] {message}")


def _reject_constant(token):
    # NaN, Infinity e -Infinity não são JSON válido
    raise ValueError(f"Invalid JSON constant: {token}")


def _parse_json_body():
    """Lê o corpo como texto e faz o parse; devolve (payload, erro)."""
    # Lê como texto para aceitar application/json e application/octet-stream
    text = request.get_data(as_text=True)
    try:
        return json.loads(text, parse_constant=_reject_constant), None
    except ValueError as exc:
        content_type = request.headers.get('Content-Type', '')
        print(
            f"[ERROR] Failed to parse webhook payload as JSON: content_type={content_type!r} "
            f"text_preview={text[:BODY_PREVIEW_LENGTH]!r} error={exc}"
        )
        return None, ('Invalid JSON payload', 400)


def handle_bot_webhook():
    config = current_app.config

    if not config.get('SLACK_BOT_TOKEN'):
        print("[ERROR] SLACK_BOT_TOKEN environment variable is not set")
        return 'Server configuration error', 500
    if not config.get('SLACK_CHANNEL_ID'):
        print("[ERROR] SLACK_CHANNEL_ID environment variable is not set")
        return 'Server configuration error', 500

    try:
        payload, error_response = _parse_json_body()
        if error_response:
            return error_response

        _debug(f"Payload type: {detect_payload_type(payload)}")
        slack_message = format_slack_message(payload, config['STATUS_PAGE_URL'])

        channel_id = normalize_channel_id(config['SLACK_CHANNEL_ID'])
        slack_message['channel'] = channel_id

        resp = send_slack_message(
            config['SLACK_BOT_TOKEN'],
            slack_message,
            config['SLACK_API_URL'],
            timeout=config.get('SLACK_TIMEOUT_SECONDS'),
            debug=config.get('DEBUG_MODE'),
        )
        result = resp.json()

        if not result.get('ok'):
            channel_info = build_channel_info(channel_id)
            print(f"[ERROR] Slack API error: error={result.get('error')} channel_info={channel_info} response={result}")
            return build_slack_error_message(result.get('error'), channel_info), 500

        print("[INFO] Successfully posted to Slack")
        return 'OK', 200
    except Exception as e:
        print(f"[ERROR] Error processing webhook: {e}")
        return 'Internal server error', 500


def handle_workflow_webhook():
    config = current_app.config

    webhook_url = config.get('SLACK_WORKFLOW_WEBHOOK_URL')
    if not webhook_url:
        print("[ERROR] SLACK_WORKFLOW_WEBHOOK_URL environment variable is not set")
        return 'Server configuration error', 500

    try:
        payload, error_response = _parse_json_body()
        if error_response:
            return error_response

        # Workflow Builder não aceita objetos aninhados
        flattened = flatten_payload(payload)
        _debug(f"Flattened payload: {len(flattened)} keys")

        resp = send_workflow_payload(
            webhook_url,
            flattened,
            timeout=config.get('SLACK_TIMEOUT_SECONDS'),
            debug=config.get('DEBUG_MODE'),
        )

        if not 200 <= resp.status_code < 300:
            error_text = resp.text
            print(f"[ERROR] Slack workflow webhook error: status={resp.status_code} body={error_text!r}")
            return error_text, resp.status_code

        print("[INFO] Successfully posted to Slack workflow")
        return 'OK', 200
    except Exception as e:
        print(f"[ERROR] Error processing webhook: {e}")
        return 'Internal server error', 500


RELAY_HANDLERS = {
    'bot': handle_bot_webhook,
    'workflow': handle_workflow_webhook,
}


def _relay_mode():
    return (current_app.config.get('RELAY_MODE') or 'bot').strip().lower()


def handle_relay_webhook():
    # Modo resolvido por requisição, como o resto da configuração
    mode = _relay_mode()
    if mode not in RELAY_MODES:
        print(f"[ERROR] RELAY_MODE inválido: {mode!r} (use um de {', '.join(RELAY_MODES)})")
        return 'Server configuration error', 500
    return RELAY_HANDLERS[mode]()


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(default_config())
    if config:
        app.config.update(config)

    @app.errorhandler(405)
    def method_not_allowed(error):
        # Mantém o header Allow gerado pelo werkzeug
        response = error.get_response()
        response.set_data('Method not allowed')
        response.mimetype = 'text/plain'
        return response

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'squadcast-slack-relay', 'mode': _relay_mode()}, 200

    # Sem OPTIONS automático: qualquer método diferente de POST recebe 405
    app.add_url_rule('/squadcast/bot', 'bot_webhook', handle_bot_webhook,
                     methods=['POST'], provide_automatic_options=False)
    app.add_url_rule('/squadcast/workflow', 'workflow_webhook', handle_workflow_webhook,
                     methods=['POST'], provide_automatic_options=False)
    app.add_url_rule('/', 'relay_webhook', handle_relay_webhook,
                     methods=['POST'], provide_automatic_options=False)

    return app
