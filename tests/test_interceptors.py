"""Tests for built-in interceptors."""

import logging
import os

from toastkit import (
    DisplayRequest,
    SensitiveContentInterceptor,
    ToastLogInterceptor,
    interceptors,
)


def test_log_interceptor_never_suppresses():
    """Test the default interceptor lets every request through."""
    assert ToastLogInterceptor().intercept(DisplayRequest(text="hello")) is False


def test_log_interceptor_logs_call_site(caplog):
    """Test the default interceptor logs the text and caller location."""
    caplog.set_level(logging.DEBUG, logger="toastkit.interceptor")

    ToastLogInterceptor().intercept(DisplayRequest(text="hello"))

    assert "'hello'" in caplog.text
    assert "test_interceptors.py" in caplog.text


def test_log_interceptor_reports_caller_through_toaster(toaster, caplog):
    """Test the logged location is the caller of show, not toastkit itself."""
    caplog.set_level(logging.DEBUG, logger="toastkit.interceptor")

    toaster.show("from a test")

    record = next(r for r in caplog.records if r.name == "toastkit.interceptor")
    assert "test_interceptors.py" in record.getMessage()


def test_log_interceptor_reports_caller_in_sibling_directory(caplog):
    """Test a directory that only shares the package prefix counts as a caller."""
    caplog.set_level(logging.DEBUG, logger="toastkit.interceptor")
    package_dir = os.path.dirname(os.path.abspath(interceptors.__file__))
    helper = os.path.join(package_dir + "_extras", "helpers.py")
    code = compile(
        "ToastLogInterceptor().intercept(DisplayRequest(text='nearby'))", helper, "exec"
    )

    namespace = {"ToastLogInterceptor": ToastLogInterceptor, "DisplayRequest": DisplayRequest}
    exec(code, namespace)

    assert f"{helper}:1" in caplog.text


def test_sensitive_interceptor_suppresses_secrets(caplog):
    """Test credential words suppress the toast and the text is not logged."""
    interceptor = SensitiveContentInterceptor()

    suppressed = interceptor.intercept(DisplayRequest(text="Your PASSWORD is hunter2"))

    assert suppressed is True
    assert "password" in caplog.text
    assert "hunter2" not in caplog.text


def test_sensitive_interceptor_allows_plain_text():
    """Test ordinary text passes."""
    assert SensitiveContentInterceptor().intercept(DisplayRequest(text="Saved")) is False


def test_sensitive_interceptor_custom_words(toaster, strategy):
    """Test custom words replace the default set."""
    toaster.set_interceptor(SensitiveContentInterceptor({"Internal"}))

    toaster.show("internal build 42")
    toaster.show("token refreshed")

    assert [r.text for r in strategy.shown] == ["token refreshed"]
