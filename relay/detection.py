from .constants import PAYLOAD_INCIDENT, PAYLOAD_STATUS_PAGE


def _is_present(value):
    # Objetos e listas contam como presentes mesmo vazios
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def is_status_page_payload(payload):
    if not isinstance(payload, dict):
        return False
    if _is_present(payload.get('status_page_name')):
        return True
    return _is_present(payload.get('issue')) and _is_present(payload.get('message'))


def detect_payload_type(payload):
    if is_status_page_payload(payload):
        return PAYLOAD_STATUS_PAGE
    return PAYLOAD_INCIDENT
