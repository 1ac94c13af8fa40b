"""
pdf_ops.py

Motor de processamento puro (sem UI):
- Leitura do PDF e remoção de metadados descritivos (pypdf)
- Rasterização página a página (PyMuPDF) e recodificação JPEG (Pillow)
- Remontagem de um PDF só de imagens, uma imagem por página, sangrando a página toda
- Guard-rail: se o resultado ficar maior que o original, devolve o PDF sem metadados

Todas as funções trabalham com bytes; o progresso sai por callback
`on_progress(percentual, rótulo)` chamado uma vez por página, em ordem.
"""


from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import fitz  # PyMuPDF
from PIL import Image
from pypdf import PdfReader, PdfWriter

from .engine_config import resolve_level
from .errors import DecodeError, RenderError
from .formatting import reduction_percent
from .schemas import CompressionPreset

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]

PDF_SIGNATURE = b"%PDF-"
# campos zerados antes de rasterizar
METADATA_KEYS = ("/Title", "/Author", "/Subject", "/Keywords", "/Producer", "/Creator")


@dataclass(frozen=True)
class CompressionResult:
    """Bytes devolvidos ao chamador + tamanhos para o relatório de redução."""
    pdf_bytes: bytes
    original_size: int
    fallback: bool = False  # True -> rasterização não reduziu; devolvemos o PDF sem metadados

    @property
    def compressed_size(self) -> int:
        return len(self.pdf_bytes)

    @property
    def reduction_percent(self) -> float:
        return reduction_percent(self.original_size, self.compressed_size)


# ===========================
#   LEITURA / METADADOS
# ===========================
def _open_reader(pdf_bytes: bytes) -> PdfReader:
    """Abre o PDF com pypdf ou levanta DecodeError.

    PDFs criptografados só passam se abrirem com senha vazia.
    """
    if not pdf_bytes.startswith(PDF_SIGNATURE):
        raise DecodeError("assinatura %PDF- ausente")
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        if reader.is_encrypted and not reader.decrypt(""):
            raise DecodeError("PDF criptografado")
        # força a leitura da árvore de páginas
        len(reader.pages)
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError(f"PDF inválido: {e}") from e
    return reader


def strip_metadata(pdf_bytes: bytes) -> bytes:
    """Regrava o PDF com título/autor/assunto/palavras-chave/produtor/criador vazios.

    O resultado é o que a etapa de renderização lê e também o candidato a
    fallback quando a rasterização não compensa.

    Args:
        pdf_bytes (bytes): PDF de entrada.

    Returns:
        bytes: PDF equivalente, sem metadados descritivos.

    Raises:
        DecodeError: entrada não é um PDF legível.
    """
    reader = _open_reader(pdf_bytes)
    try:
        writer = PdfWriter(clone_from=reader)
        writer.add_metadata({key: "" for key in METADATA_KEYS})
        buf = io.BytesIO()
        writer.write(buf)
    except Exception as e:
        raise DecodeError(f"falha ao regravar o PDF: {e}") from e
    return buf.getvalue()


# ===========================
#   RASTERIZAÇÃO
# ===========================
def _render_page(page: "fitz.Page", scale: float, jpeg_quality: int) -> Tuple[fitz.Rect, bytes]:
    """Renderiza uma página na escala pedida e devolve (viewport, jpeg)."""
    mat = fitz.Matrix(scale, scale)
    pix = page.get_pixmap(matrix=mat, alpha=False, colorspace=fitz.csRGB)  # pyright: ignore[reportAttributeAccessIssue]
    img = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
    del pix

    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=jpeg_quality, optimize=True)

    rect = page.rect
    viewport = fitz.Rect(0, 0, rect.width * scale, rect.height * scale)
    return viewport, buf.getvalue()


def _place_full_page(dst_doc: "fitz.Document", viewport: fitz.Rect, jpg_bytes: bytes) -> None:
    # página com o tamanho exato do viewport; imagem cobre tudo a partir de (0,0)
    p = dst_doc.new_page(width=viewport.width, height=viewport.height)  # pyright: ignore[reportAttributeAccessIssue]
    p.insert_image(viewport, stream=jpg_bytes, keep_proportion=False)


def _percent(done: int, total: int) -> int:
    # arredonda meio para cima (8 páginas: 1 -> 13%, não 12%)
    return int(done * 100 / total + 0.5)


def rasterize_pdf(
    pdf_bytes: bytes,
    preset: CompressionPreset,
    on_progress: Optional[ProgressCallback] = None,
) -> bytes:
    """Converte cada página em JPEG e monta um PDF novo só com as imagens.

    As páginas são processadas em ordem crescente, uma de cada vez. Qualquer
    página com falha aborta tudo (sem saída parcial).

    Raises:
        DecodeError: o renderizador não conseguiu abrir o PDF ou ele não tem páginas.
        RenderError: falha ao rasterizar/codificar uma página.
    """
    try:
        src = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise DecodeError(f"renderizador não abriu o PDF: {e}") from e

    dst = fitz.open()
    try:
        total = src.page_count
        if total == 0:
            raise DecodeError("PDF sem páginas")

        for i in range(1, total + 1):
            try:
                page = src.load_page(i - 1)
                viewport, jpg_bytes = _render_page(page, preset.scale, preset.jpeg_quality)
                _place_full_page(dst, viewport, jpg_bytes)
            except Exception as e:
                raise RenderError(i, e) from e

            logger.debug("Página %d/%d: %.1fx%.1f pt, jpeg %d bytes",
                         i, total, viewport.width, viewport.height, len(jpg_bytes))

            if on_progress is not None:
                on_progress(_percent(i, total), f"Comprimindo página {i}/{total}...")

        return dst.tobytes(garbage=4, deflate=True)
    finally:
        dst.close()
        src.close()


# ===========================
#   COMPRESSÃO
# ===========================
def compress_pdf(
    pdf_bytes: bytes,
    level: str | None,
    on_progress: Optional[ProgressCallback] = None,
) -> CompressionResult:
    """Aplica a compressão por rasterização conforme o nível.

    Respeita guard-rail: se o PDF rasterizado ficar MAIOR que o arquivo
    original (comparação estrita contra o tamanho original, não contra o
    intermediário), devolve o PDF sem metadados. Empate conta como sucesso.

    Args:
        pdf_bytes (bytes): PDF de entrada, exatamente como o usuário escolheu.
        level (str | None): 'low'|'medium'|'high'; qualquer outro valor -> 'medium'.
        on_progress (callable | None): recebe (percentual, rótulo) a cada página.

    Returns:
        CompressionResult: bytes escolhidos + tamanhos original/final.

    Raises:
        DecodeError: PDF malformado.
        RenderError: alguma página falhou.
    """
    preset = resolve_level(level)
    original_size = len(pdf_bytes)
    logger.info("Comprimindo %d bytes com nível %s (q=%.2f, escala=%.3f)",
                original_size, preset.name, preset.quality, preset.scale)

    stripped = strip_metadata(pdf_bytes)
    out_bytes = rasterize_pdf(stripped, preset, on_progress)

    if len(out_bytes) > original_size:
        logger.warning("Compressão não reduziu (%d > %d bytes), mantendo arquivo original.",
                       len(out_bytes), original_size)
        return CompressionResult(pdf_bytes=stripped, original_size=original_size, fallback=True)

    result = CompressionResult(pdf_bytes=out_bytes, original_size=original_size)
    logger.info("Compressão concluída: %d -> %d bytes (%.1f%%)",
                original_size, result.compressed_size, result.reduction_percent)
    return result
