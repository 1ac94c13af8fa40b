import os

import fitz  # PyMuPDF
import pytest

# (largura, altura) em pontos: A4 retrato, Carta, A4 paisagem
PAGE_SIZES = [(595, 842), (612, 792), (842, 595)]


def make_pdf(page_sizes=PAGE_SIZES, metadata=None, padding: int = 0) -> bytes:
    """PDF de teste com uma linha de texto por página.

    `padding` anexa um arquivo aleatório (incompressível) para deixar o
    original maior que qualquer versão rasterizada.
    """
    doc = fitz.open()
    for n, (w, h) in enumerate(page_sizes, start=1):
        page = doc.new_page(width=w, height=h)
        page.insert_text((72, 72), f"Pagina {n} de teste", fontsize=14)
    if metadata:
        doc.set_metadata(metadata)
    if padding:
        doc.embfile_add("padding.bin", os.urandom(padding))
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def small_pdf() -> bytes:
    return make_pdf(metadata={
        "title": "Relatório secreto",
        "author": "Fulano",
        "subject": "Assunto",
        "keywords": "a, b",
        "creator": "Editor",
        "producer": "Gerador",
    })


@pytest.fixture
def heavy_pdf() -> bytes:
    return make_pdf(padding=400_000)
