"""认证接口与会话测试。"""
import tempfile
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import requests

from kaiten.auth.client import DECODE_ERROR, AuthClient
from kaiten.auth.models import AuthResult, User
from kaiten.auth.session import SessionStore
from kaiten.config import TOKEN_KEY
from kaiten.storage import KeyValueFile

USER_JSON = {"id": 1, "login": "a", "email": "a@x.com", "token": "T"}


def _response(status: int, body: Optional[object] = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    if body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


def _http(*responses: MagicMock) -> MagicMock:
    http = MagicMock(spec=requests.Session)
    http.request.side_effect = list(responses)
    return http


def _session(tmp: str, http: MagicMock, token: str = "") -> SessionStore:
    storage = KeyValueFile(Path(tmp) / "prefs.json")
    if token:
        storage.set(TOKEN_KEY, token)
    return SessionStore(AuthClient("http://api.test", http=http), storage)


def test_sign_in_success_stores_user_and_token() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = _http(_response(200, USER_JSON))
        session = _session(tmp, http)
        result = session.sign_in("a", "b")
        assert result.success
        assert session.is_authorized
        assert session.token == "T"
        assert session.current_user.login == "a"
        assert session.current_user.token == "T"
        method, url = http.request.call_args.args
        assert method == "POST"
        assert url == "http://api.test/api/auth/signin"
        assert http.request.call_args.kwargs["json"] == {"login": "a", "password": "b"}
        # 令牌写入了偏好文件，重启后仍在
        assert KeyValueFile(Path(tmp) / "prefs.json").get_str(TOKEN_KEY) == "T"


def test_sign_in_failure_uses_server_message() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(401, {"message": "bad credentials"})))
        result = session.sign_in("a", "wrong")
        assert not result.success
        assert result.message == "bad credentials"
        assert not session.is_authorized
        assert session.current_user is None
        assert session.token == ""


def test_sign_in_failure_without_message_reports_status() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(500)))
        result = session.sign_in("a", "b")
        assert result.message == "Login error (status 500)."


def test_sign_in_transport_error() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = MagicMock(spec=requests.Session)
        http.request.side_effect = requests.ConnectionError("connection refused")
        session = _session(tmp, http)
        result = session.sign_in("a", "b")
        assert not result.success
        assert "connection refused" in result.message
        assert not session.is_authorized


def test_sign_in_undecodable_user() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(200, {"id": 1, "login": "a"})))
        result = session.sign_in("a", "b")
        assert result.message == DECODE_ERROR
        assert not session.is_authorized


def test_sign_up_sends_email() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = _http(_response(200, {**USER_JSON, "password": "b"}))
        session = _session(tmp, http)
        result = session.sign_up("a", "b", "a@x.com")
        assert result.success
        assert session.is_authorized
        assert session.current_user.password is None
        assert http.request.call_args.args[1].endswith("/api/auth/signup")
        assert http.request.call_args.kwargs["json"] == {"login": "a", "password": "b", "email": "a@x.com"}


def test_sign_up_failure_without_message() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(409, ["taken"])))
        assert session.sign_up("a", "b", "a@x.com").message == "Sign up error (status 409)."


def test_restore_without_token_makes_no_request() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = _http()
        session = _session(tmp, http)
        assert session.restore() is False
        assert not session.is_authorized
        http.request.assert_not_called()


def test_restore_with_valid_token() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = _http(_response(200), _response(200, USER_JSON))
        session = _session(tmp, http, token="T")
        assert session.restore() is True
        assert session.is_authorized
        assert session.current_user.id == 1
        assert session.current_user.email == "a@x.com"
        check, fetch = http.request.call_args_list
        assert check.args == ("POST", "http://api.test/api/auth/checkout")
        assert check.kwargs["headers"]["Authorization"] == "Bearer T"
        assert fetch.args == ("GET", "http://api.test/api/auth/user")


def test_restore_with_expired_token_clears_it() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = _http(_response(401))
        session = _session(tmp, http, token="OLD")
        assert session.restore() is False
        assert not session.is_authorized
        assert session.token == ""
        assert http.request.call_count == 1


def test_restore_fetch_failure_keeps_token() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(200), _response(500)), token="T")
        assert session.restore() is False
        assert not session.is_authorized
        assert session.current_user is None
        assert session.token == "T"


def test_logout_clears_everything() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(200, USER_JSON)))
        session.sign_in("a", "b")
        session.logout()
        assert not session.is_authorized
        assert session.current_user is None
        assert session.token == ""
        # 未登录时退出也不报错
        session.logout()
        assert not session.is_authorized


def test_subscribers_notified_and_unsubscribed() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(200, USER_JSON)))
        seen = []
        unsubscribe = session.subscribe(lambda s: seen.append(s.is_authorized))
        session.sign_in("a", "b")
        session.logout()
        assert seen == [True, False]
        unsubscribe()
        session.logout()
        assert seen == [True, False]


def test_update_profile_is_local() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = _http(_response(200, USER_JSON))
        session = _session(tmp, http)
        assert session.update_profile("x", "x@x.com") is None
        session.sign_in("a", "b")
        user = session.update_profile(" bob ", "bob@x.com")
        assert user.login == "bob"
        assert session.current_user.email == "bob@x.com"
        assert session.token == "T"
        assert http.request.call_count == 1


def test_check_token_empty_makes_no_request() -> None:
    http = _http()
    client = AuthClient("http://api.test/", http=http)
    assert client.check_token("") is False
    assert client.fetch_user("").success is False
    http.request.assert_not_called()


def test_restore_checkout_transport_error_clears_token() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        http = MagicMock(spec=requests.Session)
        http.request.side_effect = requests.Timeout("timed out")
        session = _session(tmp, http, token="T")
        assert session.restore() is False
        assert not session.is_authorized
        assert session.token == ""
        assert http.request.call_count == 1


def test_sign_in_empty_token_is_failure() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(200, {**USER_JSON, "token": ""})))
        result = session.sign_in("a", "b")
        assert not result.success
        assert result.message == "Server returned no token."
        assert not session.is_authorized
        assert session.current_user is None
        assert session.token == ""


def test_sign_up_empty_token_is_failure() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(_response(200, {**USER_JSON, "token": ""})))
        assert session.sign_up("a", "b", "a@x.com").message == "Server returned no token."
        assert not session.is_authorized


def test_expired_restore_result_after_sign_in_is_ignored() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(), token="OLD")
        session.apply_auth(AuthResult.ok(User(id=2, login="new", email="n@x.com", token="NEW")))
        assert session.apply_restore("OLD", AuthResult(success=False, expired=True)) is True
        assert session.is_authorized
        assert session.token == "NEW"
        assert session.current_user.login == "new"


def test_successful_restore_result_after_sign_in_is_ignored() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(), token="OLD")
        session.apply_auth(AuthResult.ok(User(id=2, login="new", email="n@x.com", token="NEW")))
        old = User(id=1, login="old", email="o@x.com", token="OLD")
        session.apply_restore("OLD", AuthResult.ok(old))
        assert session.current_user.login == "new"
        assert session.current_user.token == "NEW"
        assert session.token == "NEW"


def test_restore_result_for_replaced_token_is_ignored() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp, _http(), token="OLD")
        session.logout()
        assert session.apply_restore("OLD", AuthResult.ok(User(**USER_JSON))) is False
        assert not session.is_authorized
        assert session.current_user is None


def test_explicit_zero_timeout_is_kept() -> None:
    assert AuthClient("http://api.test", http=_http(), timeout=0).timeout == 0
    assert AuthClient("http://api.test", http=_http()).timeout > 0
