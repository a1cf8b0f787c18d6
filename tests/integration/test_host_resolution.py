from core.config import DEFAULT_HOST, DEFAULT_RC_PORT
from utils.network import resolve_http_host, resolve_rc_base_url


def test_resolve_http_host_defaults_to_localhost():
    assert resolve_http_host(None, None) == DEFAULT_HOST


def test_resolve_http_host_prefers_argument():
    assert resolve_http_host("10.0.0.5", "editor.local") == "10.0.0.5"


def test_resolve_http_host_falls_back_to_env():
    assert resolve_http_host(None, "editor.local") == "editor.local"


def test_resolve_rc_base_url_precedence():
    assert resolve_rc_base_url(None, None, None, None) == f"http://localhost:{DEFAULT_RC_PORT}"
    assert resolve_rc_base_url(None, None, "editor.local", 30020) == "http://editor.local:30020"
    assert resolve_rc_base_url("10.0.0.5", 30030, "editor.local", 30020) == "http://10.0.0.5:30030"
