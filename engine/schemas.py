"""
engine/schemas.py

Modelos de dados trocados entre a UI (via ponte pywebview) e o motor.
Campos:
- `CompressionPreset`: parâmetros imutáveis de um nível (qualidade JPEG e escala).
- `SourceFileIn`: arquivo escolhido na UI (nome, tipo MIME, conteúdo em base64).
- `CompressIn`: nível pedido; ausente -> 'medium'.
- `ProgressState`: evento de progresso (percentual 0..100 + rótulo).
"""

# engine/schemas.py
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CompressionPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quality: float = Field(gt=0, le=1)
    scale: float = Field(gt=0)

    @property
    def jpeg_quality(self) -> int:
        # Pillow trabalha com 1..95 (0..1 no canvas do navegador)
        return max(1, min(95, int(round(self.quality * 100))))


class SourceFileIn(BaseModel):
    name: str = "arquivo.pdf"
    type: str = ""
    bytes_b64: str


class CompressIn(BaseModel):
    level: Optional[str] = None


class ProgressState(BaseModel):
    percent: int = Field(ge=0, le=100)
    label: str
