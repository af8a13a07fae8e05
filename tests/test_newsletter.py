from unittest import mock
from urllib.error import HTTPError, URLError
from urllib.parse import parse_qs

import pytest

URL = "/api/newsletter/"


def _remote_answer(body: bytes):
    resp = mock.MagicMock()
    resp.read.return_value = body
    resp.__enter__.return_value = resp
    return resp


@pytest.fixture
def urlopen():
    with mock.patch("newsletter.views.urllib.request.urlopen") as m:
        yield m


def _post(client, email):
    return client.post(URL, {"email": email}, content_type="application/json")


def test_subscribed(client, settings, urlopen):
    settings.NEWSLETTER_API_URL = "http://api.example.org/rpc/newsletter_email_ins"
    settings.NEWSLETTER_CONFIRM_URL = "http://site.example.org/default/email_enviar.inc.php"
    urlopen.return_value = _remote_answer(b'{"id": 42}')

    response = _post(client, "fulana@exemplo.com.br")

    assert response.status_code == 201
    assert response.json() == {"status": "subscribed", "email": "fulana@exemplo.com.br"}
    subscribe_call, confirm_call = urlopen.call_args_list
    req = subscribe_call.args[0]
    assert req.full_url == "http://api.example.org/rpc/newsletter_email_ins"
    assert req.get_method() == "POST"
    assert parse_qs(req.data.decode("utf-8")) == {"p_email": ["fulana@exemplo.com.br"]}
    assert subscribe_call.kwargs["timeout"] == settings.NEWSLETTER_API_TIMEOUT

    confirm = confirm_call.args[0]
    assert confirm.get_method() == "GET"
    assert confirm.full_url == "http://site.example.org/default/email_enviar.inc.php?email=fulana%40exemplo.com.br"


def test_form_encoded_post(client, urlopen):
    urlopen.return_value = _remote_answer(b"1")
    response = client.post(URL, {"email": "a.b@exemplo.org"})
    assert response.status_code == 201


def test_already_registered(client, urlopen):
    urlopen.return_value = _remote_answer(b"null")
    response = _post(client, "fulana@exemplo.com.br")
    assert response.status_code == 409
    assert response.json() == {"status": "already_registered"}


def test_empty_remote_body_means_registered(client, urlopen):
    urlopen.return_value = _remote_answer(b"")
    assert _post(client, "fulana@exemplo.com.br").status_code == 409


@pytest.mark.parametrize("email", ["", "   ", "sem-arroba", "a@b", "a@@exemplo.com", "a b@exemplo.com"])
def test_invalid_email(client, urlopen, email):
    response = _post(client, email)
    assert response.status_code == 400
    assert "error" in response.json()
    urlopen.assert_not_called()


def test_email_is_case_insensitive(client, urlopen):
    urlopen.return_value = _remote_answer(b"{}")
    assert _post(client, "Fulana@Exemplo.COM.BR").status_code == 201


@pytest.mark.parametrize(
    "error",
    [
        HTTPError("http://api.example.org", 500, "boom", {}, None),
        URLError("connection refused"),
    ],
)
def test_remote_failure(client, urlopen, error):
    urlopen.side_effect = error
    response = _post(client, "fulana@exemplo.com.br")
    assert response.status_code == 502
    assert "subscription API" in response.json()["error"]


def test_remote_invalid_json(client, urlopen):
    urlopen.return_value = _remote_answer(b"<html>oops</html>")
    assert _post(client, "fulana@exemplo.com.br").status_code == 502


def test_get_not_allowed(client):
    assert client.get(URL).status_code == 405


@pytest.mark.parametrize("body", [["fulana@exemplo.com.br"], '"fulana@exemplo.com.br"', "42", "null"])
def test_body_not_an_object(client, urlopen, body):
    response = client.post(URL, body, content_type="application/json")
    assert response.status_code == 400
    assert response.json() == {"error": "missing field: email"}
    urlopen.assert_not_called()


@pytest.mark.parametrize("email", ["joão@exemplo.com.br", "ana@exemplo.cõm", "ñ@exemplo.org"])
def test_non_ascii_email_rejected(client, urlopen, email):
    assert _post(client, email).status_code == 400
    urlopen.assert_not_called()


def test_confirmation_failure_keeps_subscription(client, urlopen):
    urlopen.side_effect = [_remote_answer(b'{"id": 1}'), URLError("mailer down")]
    response = _post(client, "fulana@exemplo.com.br")
    assert response.status_code == 201
    assert urlopen.call_count == 2


def test_confirmation_disabled(client, settings, urlopen):
    settings.NEWSLETTER_CONFIRM_URL = ""
    urlopen.return_value = _remote_answer(b'{"id": 1}')
    assert _post(client, "fulana@exemplo.com.br").status_code == 201
    assert urlopen.call_count == 1


def test_no_confirmation_when_already_registered(client, urlopen):
    urlopen.return_value = _remote_answer(b"null")
    _post(client, "fulana@exemplo.com.br")
    assert urlopen.call_count == 1
