"""
engine/engine_config.py

Define presets de compressão e limites de entrada.
`LEVELS` mapeia: 'low'|'medium'|'high' -> {quality, dpi}

Atenção: a nomenclatura é invertida em relação à intuição. 'high' é a
compressão mais forte (menor arquivo, mais perda), não a maior fidelidade.
A UI depende desse mapeamento.
"""

# engine/engine_config.py
from __future__ import annotations
import os
from typing import Dict

from .schemas import CompressionPreset

# Resolução base do PDF (pontos por polegada): escala = dpi / BASE_DPI
BASE_DPI = 72

LEVELS: Dict[str, dict] = {
    "low":    {"quality": 0.85, "dpi": 150},
    "medium": {"quality": 0.65, "dpi": 120},
    "high":   {"quality": 0.40, "dpi": 90},
}
DEFAULT_LEVEL = "medium"

PDF_MIME = "application/pdf"
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "50"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024

COMPRESSED_SUFFIX = "_comprimido"
DEFAULT_FILENAME = "compressed.pdf"


def resolve_level(name: str | None) -> CompressionPreset:
    """Converte o nome do nível em parâmetros concretos.

    Nunca falha: nome ausente ou desconhecido cai silenciosamente em 'medium'.
    Essa tolerância é intencional (a UI só envia os três nomes, mas qualquer
    outro valor deve continuar comprimindo com o preset padrão).

    Args:
        name (str | None): 'low'|'medium'|'high' ou qualquer outra coisa.

    Returns:
        CompressionPreset: qualidade JPEG (0..1] e escala de renderização.
    """
    key = name if name in LEVELS else DEFAULT_LEVEL
    params = LEVELS[key]
    return CompressionPreset(
        name=key,
        quality=params["quality"],
        scale=params["dpi"] / BASE_DPI,
    )
