import pytest

from engine.errors import ValidationError
from engine.validation import MSG_NOT_PDF, MSG_TOO_LARGE, validate_source

LIMIT = 50 * 1024 * 1024


def test_pdf_within_limit_is_accepted():
    validate_source("a.pdf", "application/pdf", 1234)


def test_exact_limit_is_accepted():
    validate_source("a.pdf", "application/pdf", LIMIT)


def test_one_byte_over_limit_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_source("a.pdf", "application/pdf", LIMIT + 1)
    assert exc.value.message == MSG_TOO_LARGE


@pytest.mark.parametrize("mime", ["image/png", "", "text/plain", "application/octet-stream"])
def test_non_pdf_mime_is_rejected(mime):
    with pytest.raises(ValidationError) as exc:
        validate_source("a.pdf", mime, 10)
    assert exc.value.message == MSG_NOT_PDF
