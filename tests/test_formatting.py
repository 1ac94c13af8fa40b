import pytest

from engine.formatting import (
    compressed_filename,
    format_file_size,
    format_reduction,
    reduction_percent,
)


@pytest.mark.parametrize("name, expected", [
    ("Invoice.pdf", "Invoice_comprimido.pdf"),
    ("report.pdf", "report_comprimido.pdf"),
    ("contrato.v2.PDF", "contrato.v2_comprimido.pdf"),
    ("semextensao", "compressed.pdf"),
    (".pdf", "compressed.pdf"),
    ("", "compressed.pdf"),
    (None, "compressed.pdf"),
])
def test_compressed_filename(name, expected):
    assert compressed_filename(name) == expected


@pytest.mark.parametrize("size, expected", [
    (0, "0 Bytes"),
    (500, "500 Bytes"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (1024 * 1024, "1 MB"),
    (int(2.25 * 1024 * 1024), "2.25 MB"),
    (3 * 1024 ** 3, "3 GB"),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_reduction_percent():
    assert reduction_percent(1000, 250) == pytest.approx(75.0)
    assert reduction_percent(1000, 1000) == 0.0
    assert reduction_percent(0, 0) == 0.0
    assert format_reduction(3000, 1000) == "66.7%"
