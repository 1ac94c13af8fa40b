"""
engine/formatting.py

Helpers de apresentação usados pela ponte com a UI:
- `format_file_size(n)`: "0 Bytes", "1.5 KB", "12.34 MB"...
- `reduction_percent(antes, depois)`: redução em % (pode ser 0 no fallback).
- `compressed_filename(nome)`: "relatorio.pdf" -> "relatorio_comprimido.pdf".
"""

# engine/formatting.py
from __future__ import annotations

from .engine_config import COMPRESSED_SUFFIX, DEFAULT_FILENAME

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    value = float(num_bytes)
    i = 0
    while value >= 1024 and i < len(SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    # duas casas, sem zeros à direita (1.50 -> 1.5, 2.00 -> 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[i]}"


def reduction_percent(original_size: int, compressed_size: int) -> float:
    if original_size <= 0:
        return 0.0
    return (original_size - compressed_size) / original_size * 100


def format_reduction(original_size: int, compressed_size: int) -> str:
    return f"{reduction_percent(original_size, compressed_size):.1f}%"


def compressed_filename(filename: str | None) -> str:
    """Nome sugerido para download: remove só a última extensão e põe o sufixo.

    Sem arquivo, sem extensão ou com nome vazio antes do ponto -> 'compressed.pdf'.
    """
    if not filename:
        return DEFAULT_FILENAME
    dot = filename.rfind(".")
    if dot <= 0:
        return DEFAULT_FILENAME
    return f"{filename[:dot]}{COMPRESSED_SUFFIX}.pdf"
