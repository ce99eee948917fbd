import json
from datetime import date, datetime, time


def _is_date_like(value):
    return isinstance(value, (datetime, date, time))


def _serialize_leaf(value):
    if isinstance(value, (list, tuple)):
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=str)
    if _is_date_like(value):
        return value.isoformat()
    return value


def flatten_payload(data, result=None, prefix=''):
    """Achata um objeto JSON aninhado em um único nível.

    As chaves são o caminho unido por '_' (``{"a": {"b": 1}}`` -> ``{"a_b": 1}``).
    Listas viram texto JSON; primitivos e ``None`` passam sem alteração.
    """
    if result is None:
        result = {}
    if not isinstance(data, dict):
        return result

    for key, value in data.items():
        full_key = f"{prefix}_{key}" if prefix else str(key)
        if isinstance(value, dict):
            flatten_payload(value, result, full_key)
        else:
            result[full_key] = _serialize_leaf(value)
    return result
