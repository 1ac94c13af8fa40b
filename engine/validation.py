"""
engine/validation.py

Checagens feitas ANTES de qualquer processamento: um arquivo recusado aqui
nunca entra no estado da sessão nem chega ao pipeline.
"""

# engine/validation.py
from __future__ import annotations
import logging

from .engine_config import MAX_UPLOAD_BYTES, MAX_UPLOAD_MB, PDF_MIME
from .errors import ValidationError

logger = logging.getLogger(__name__)

MSG_NOT_PDF = "Por favor, selecione apenas arquivos PDF."
MSG_TOO_LARGE = f"O arquivo é muito grande. Tamanho máximo: {MAX_UPLOAD_MB}MB."


def validate_source(name: str, mime: str, size: int) -> None:
    """Recusa tipo MIME diferente de PDF ou tamanho acima do teto.

    Raises:
        ValidationError: com a mensagem a ser exibida ao usuário.
    """
    if (mime or "").lower() != PDF_MIME:
        logger.info("Arquivo recusado (tipo %r): %s", mime, name)
        raise ValidationError(MSG_NOT_PDF)
    if size > MAX_UPLOAD_BYTES:
        logger.info("Arquivo recusado (%d bytes > %d): %s", size, MAX_UPLOAD_BYTES, name)
        raise ValidationError(MSG_TOO_LARGE)
