"""
engine/storage.py

Estado efêmero em RAM da sessão desktop (um usuário, uma janela).
- Guarda o arquivo de origem escolhido (`source`) e o último resultado (`output`).
- Nova seleção ou `clear()` invalidam qualquer resultado anterior.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .pdf_ops import CompressionResult


@dataclass(frozen=True)
class SourceDocument:
    name: str
    mime: str
    data: bytes  # conteúdo como bytes, somente leitura depois de escolhido

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class Session:
    """No máximo um arquivo de origem e um resultado por vez."""
    source: Optional[SourceDocument] = None
    output: Optional[CompressionResult] = None

    def select(self, doc: SourceDocument) -> None:
        self.source = doc
        self.output = None

    def clear(self) -> None:
        self.source = None
        self.output = None

    def store_output(self, result: CompressionResult) -> None:
        self.output = result
