from unittest import mock

import requests

VALID_INPUT = {
    'N': '50',
    'P': '50',
    'K': '50',
    'temperature': '25',
    'humidity': '70',
    'pH': '6.5',
    'rainfall': '200',
}


def fake_response(status_code=200, payload=None, body=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if body is not None:
        response.json.side_effect = ValueError(f"Expecting value: {body!r}")
    else:
        response.json.return_value = payload
    return response
