# bridge.py
from __future__ import annotations
import base64
import json
import logging
import threading
from typing import Any, Callable, Dict, Optional

import webview
from pydantic import ValidationError as PayloadError

from engine.errors import PipelineError, ValidationError
from engine.formatting import compressed_filename, format_file_size, format_reduction
from engine.pdf_ops import compress_pdf
from engine.schemas import CompressIn, ProgressState, SourceFileIn
from engine.storage import Session, SourceDocument
from engine.validation import validate_source

logger = logging.getLogger(__name__)

MSG_GENERIC_FAILURE = "Erro ao comprimir o PDF. Tente novamente."
MSG_NO_FILE = "Nenhum arquivo selecionado."
MSG_BUSY = "Já existe uma compressão em andamento."

ProgressSink = Callable[[ProgressState], None]


def _webview_progress(state: ProgressState) -> None:
    """Empurra o progresso para a página (window.pdfCompressor.updateProgress)."""
    if not webview.windows:
        return
    webview.windows[0].evaluate_js(
        "window.pdfCompressor && window.pdfCompressor.updateProgress("
        f"{state.percent}, {json.dumps(state.label)})"
    )


class Api:
    """
    Ponte JS <-> Python para o compressor (sem servidor).
    A UI só conhece estes métodos; o motor não conhece a UI.
    """
    def __init__(self, progress_sink: Optional[ProgressSink] = None) -> None:
        self.session = Session()
        self._run_lock = threading.Lock()
        self.progress_sink: ProgressSink = progress_sink or _webview_progress

    # ---------- helpers ----------
    def _b64_to_bytes(self, b64: str) -> bytes:
        return base64.b64decode(b64.encode('ascii'), validate=True)

    def _notify(self, percent: int, label: str) -> None:
        self.progress_sink(ProgressState(percent=percent, label=label))

    # ---------- API: SELEÇÃO ----------
    def select_file(self, file: Dict[str, Any]) -> Dict[str, Any]:
        """
        file: { name, type (mime), bytes_b64 }
        Retorna: { name, size, size_label } ou { error }
        """
        try:
            f = SourceFileIn.model_validate(file)
            data = self._b64_to_bytes(f.bytes_b64)
            validate_source(f.name, f.type, len(data))
        except ValidationError as e:
            return {'error': e.message}
        except (PayloadError, ValueError):
            logger.exception("Payload de arquivo inválido")
            return {'error': MSG_GENERIC_FAILURE}

        self.session.select(SourceDocument(name=f.name, mime=f.type, data=data))
        logger.info("Arquivo selecionado: %s (%d bytes)", f.name, len(data))
        return {'name': f.name, 'size': len(data), 'size_label': format_file_size(len(data))}

    def clear(self) -> Dict[str, Any]:
        self.session.clear()
        return {'cleared': True}

    # ---------- API: COMPRESSÃO ----------
    def compress(self, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        payload: { level: 'low'|'medium'|'high' }  (ausente/desconhecido -> 'medium')
        Retorna: { original_size, compressed_size, original_label, compressed_label,
                   reduction_percent, filename, fallback } ou { error }
        """
        src = self.session.source
        if src is None:
            return {'error': MSG_NO_FILE}
        # pywebview chama cada método js_api em uma thread própria
        if not self._run_lock.acquire(blocking=False):
            return {'error': MSG_BUSY}

        try:
            try:
                req = CompressIn.model_validate(payload or {})
            except PayloadError:
                logger.exception("Payload de compressão inválido")
                return {'error': MSG_GENERIC_FAILURE}

            self._notify(0, 'Carregando arquivo PDF...')
            result = compress_pdf(src.data, req.level, on_progress=self._notify)
        except PipelineError:
            logger.exception("Erro na compressão de %s", src.name)
            return {'error': MSG_GENERIC_FAILURE}
        except Exception:
            logger.exception("Erro inesperado na compressão de %s", src.name)
            return {'error': MSG_GENERIC_FAILURE}
        finally:
            self._run_lock.release()

        # o arquivo pode ter sido trocado/limpo durante a execução
        if self.session.source is not src:
            return {'error': MSG_GENERIC_FAILURE}

        self.session.store_output(result)
        self._notify(100, 'Compressão concluída!')
        return {
            'original_size': result.original_size,
            'compressed_size': result.compressed_size,
            'original_label': format_file_size(result.original_size),
            'compressed_label': format_file_size(result.compressed_size),
            'reduction_percent': format_reduction(result.original_size, result.compressed_size),
            'filename': compressed_filename(src.name),
            'fallback': result.fallback,
        }

    # ---------- API: DOWNLOAD ----------
    def save(self) -> Dict[str, Any]:
        """
        Abre o diálogo de salvar com o nome sugerido e grava o PDF comprimido.
        Retorna: { saved, path } ou { error }
        """
        src, out = self.session.source, self.session.output
        if src is None or out is None:
            return {'saved': False, 'path': None}

        try:
            dlg = webview.windows[0].create_file_dialog(
                webview.FileDialog.SAVE,
                save_filename=compressed_filename(src.name),
            )
            if not dlg:
                return {'saved': False, 'path': None}

            save_path = dlg if isinstance(dlg, str) else dlg[0]
            if not str(save_path).lower().endswith('.pdf'):
                save_path = str(save_path) + '.pdf'

            with open(save_path, 'wb') as f:
                f.write(out.pdf_bytes)
        except Exception as e:
            logger.exception("Falha ao salvar o PDF comprimido")
            return {'error': str(e)}

        logger.info("PDF comprimido salvo em %s", save_path)
        return {'saved': True, 'path': save_path}
