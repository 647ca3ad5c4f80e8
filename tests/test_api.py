from unittest.mock import MagicMock

import pytest
import requests

from config import AppConfig
from domain.models import registration_from_form
from services.api import RegistrationApiError, RegistrationClient

BASE = "http://backend.test/registrations"


def make_response(status=200, body=None, json_error=False):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 400
    if json_error:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = body
    return response


def make_client(response=None, exc=None):
    session = MagicMock()
    if exc is not None:
        session.request.side_effect = exc
    else:
        session.request.return_value = response
    return RegistrationClient(BASE + "/", session=session), session


def make_registration():
    return registration_from_form({'ownerId': 'O1', 'plateNo': 'ABC-1', 'manufacturer': 'Toyota',
                                   'vehicle': 'Sedan', 'owner': 'Jane', 'manufacturedYear': '2020'})


def test_list_returns_existing_registrations():
    records = [{'_id': 'a'}, {'_id': 'b'}]
    client, session = make_client(make_response(body={'success': True, 'existingRegistrations': records}))
    assert client.list_registrations() == records
    session.request.assert_called_once_with("GET", BASE, json=None, timeout=None)


def test_list_missing_key_is_empty():
    client, _ = make_client(make_response(body={'success': True}))
    assert client.list_registrations() == []


def test_create_posts_payload_to_new():
    client, session = make_client(make_response(status=201, body={'success': 'Registration Ok'}))
    result = client.create_registration(make_registration())
    assert result == {'success': 'Registration Ok'}
    args, kwargs = session.request.call_args
    assert args == ("POST", BASE + "/new")
    assert kwargs['json']['manufacturedYear'] == 2020
    assert isinstance(kwargs['json']['manufacturedYear'], int)


def test_update_puts_to_id_path():
    client, session = make_client(make_response(body={'success': 'Update Successful', 'registration': {}}))
    client.update_registration('abc', make_registration())
    args, kwargs = session.request.call_args
    assert args == ("PUT", BASE + "/update/abc")
    assert '_id' not in kwargs['json']


def test_delete_has_no_body():
    client, session = make_client(make_response(body={'success': 'Delete Successful'}))
    assert client.delete_registration('abc')['success'] == 'Delete Successful'
    session.request.assert_called_once_with("DELETE", BASE + "/delete/abc", json=None, timeout=None)


def test_error_body_text_is_surfaced_verbatim():
    client, _ = make_client(make_response(status=409, body={'error': 'Duplicate plate'}))
    with pytest.raises(RegistrationApiError) as exc:
        client.create_registration(make_registration())
    assert str(exc.value) == 'Duplicate plate'
    assert exc.value.status_code == 409
    assert exc.value.endpoint == BASE + "/new"


def test_error_without_body_falls_back_to_status():
    client, _ = make_client(make_response(status=502, json_error=True))
    with pytest.raises(RegistrationApiError) as exc:
        client.list_registrations()
    assert str(exc.value) == 'HTTP error! Status: 502'


def test_error_body_without_error_key_falls_back_to_status():
    client, _ = make_client(make_response(status=404, body={'message': 'nope'}))
    with pytest.raises(RegistrationApiError) as exc:
        client.delete_registration('zzz')
    assert str(exc.value) == 'HTTP error! Status: 404'


def test_transport_failure_is_wrapped():
    client, _ = make_client(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(RegistrationApiError) as exc:
        client.list_registrations()
    assert 'connection refused' in str(exc.value)
    assert exc.value.status_code is None
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_success_without_json_body_is_empty_dict():
    client, _ = make_client(make_response(status=204, json_error=True))
    assert client.delete_registration('abc') == {}


def test_from_config_uses_url_and_timeout():
    client = RegistrationClient.from_config(AppConfig(api_base_url=BASE, request_timeout=5.0))
    assert client.base_url == BASE
    assert client.timeout == 5.0


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("REGISTRATIONS_API_URL", "http://api.example/registrations/")
    monkeypatch.setenv("REGISTRATIONS_API_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = AppConfig.from_env()
    assert config.api_base_url == "http://api.example/registrations"
    assert config.request_timeout == 2.5
    assert config.log_level == "DEBUG"


def test_config_defaults(monkeypatch):
    for var in ("REGISTRATIONS_API_URL", "REGISTRATIONS_API_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    config = AppConfig.from_env()
    assert config.api_base_url == "http://localhost:8080/registrations"
    assert config.request_timeout is None
    assert config.log_level == "INFO"
