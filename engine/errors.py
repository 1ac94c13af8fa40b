"""
engine/errors.py

Hierarquia de erros do motor de compressão.
- `ValidationError`: arquivo recusado antes de entrar na sessão (tipo/tamanho).
- `DecodeError`: bytes de origem não formam um PDF legível.
- `RenderError`: alguma página falhou ao rasterizar/codificar.

`DecodeError` e `RenderError` derivam de `PipelineError`; a ponte com a UI
trata as duas da mesma forma (mensagem genérica).
"""

# engine/errors.py
from __future__ import annotations


class CompressorError(Exception):
    """Base de todos os erros do motor."""


class ValidationError(CompressorError):
    """Entrada recusada; `message` já vem pronta para o usuário."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PipelineError(CompressorError):
    pass


class DecodeError(PipelineError):
    pass


class RenderError(PipelineError):
    def __init__(self, page_number: int, cause: Exception | None = None):
        super().__init__(f"falha ao rasterizar a página {page_number}: {cause}")
        self.page_number = page_number
        self.cause = cause
