import requests


def send_slack_message(bot_token, message, api_url, timeout=None, debug=False):
    headers = {
        "Authorization": f"Bearer {bot_token}",
        "Content-Type": "application/json",
    }
    resp = requests.post(api_url, json=message, headers=headers, timeout=timeout)
    if debug:
        print(f"[DEBUG] Slack API response: {resp.status_code}")
    return resp


def send_workflow_payload(webhook_url, data, timeout=None, debug=False):
    resp = requests.post(webhook_url, json=data, timeout=timeout)
    if debug:
        print(f"[DEBUG] Slack workflow response: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            print(f"[DEBUG] Response content: {resp.text}")
    return resp
