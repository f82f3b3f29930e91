import logging

from fridge.logging_utils import RedactFilter, redact_text


def test_redact_headers_and_keys():
    text = "Authorization: Bearer fr_abcdefghijk X-User-Key: secret123 api_key=xyz"
    out = redact_text(text)
    assert "fr_abcdefghijk" not in out
    assert "secret123" not in out
    assert "xyz" not in out
    assert out.count("<redacted>") == 3


def test_bare_user_key_is_redacted():
    assert redact_text("rotated to fr_Zx9-abcdEFGH1234") == "rotated to fr_<redacted>"


def test_filter_redacts_args():
    record = logging.LogRecord(
        "fridge_api", logging.INFO, __file__, 1, "auth %s", ("Authorization: Bearer fr_abcdefghijk",), None
    )
    assert RedactFilter().filter(record)
    assert "fr_abcdefghijk" not in record.getMessage()
