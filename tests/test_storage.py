from engine.pdf_ops import CompressionResult
from engine.storage import Session, SourceDocument


def _doc(name="a.pdf"):
    return SourceDocument(name=name, mime="application/pdf", data=b"%PDF-1.4")


def test_new_selection_invalidates_output():
    session = Session()
    session.select(_doc())
    session.store_output(CompressionResult(pdf_bytes=b"x", original_size=8))
    assert session.output is not None

    session.select(_doc("b.pdf"))
    assert session.source.name == "b.pdf"
    assert session.output is None


def test_clear_drops_everything():
    session = Session()
    session.select(_doc())
    session.store_output(CompressionResult(pdf_bytes=b"x", original_size=8))
    session.clear()
    assert session.source is None
    assert session.output is None


def test_source_size():
    assert _doc().size == len(b"%PDF-1.4")
