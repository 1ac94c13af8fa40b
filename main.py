# main.py
import logging
import os
import sys
from pathlib import Path
import webview
from bridge import Api

def app_root() -> Path:
    """
    Retorna a raiz dos arquivos estáticos.
    - Em build PyInstaller one-file: usa a pasta temporária (sys._MEIPASS).
    - Em dev: usa a pasta onde está este arquivo.
    """
    meipass = getattr(sys, "_MEIPASS", None)  # evita aviso do type checker
    if meipass:
        return Path(meipass)
    return Path(__file__).resolve().parent

def log_level_from_env() -> int:
    """LOG_LEVEL inválido (ex.: 'verbose') cai em INFO em vez de derrubar o app."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO

def setup_logging() -> None:
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main() -> None:
    setup_logging()
    root = app_root()
    index_uri = (root / "index.html").as_uri()  # gera "file:///.../index.html"

    window = webview.create_window(
        title="Compressor de PDF",
        url=index_uri,
        width=760,
        height=720,
        resizable=True,
        js_api=Api(),
    )
    logging.getLogger(__name__).info("Janela criada: %s", window.title)
    webview.start(debug=os.getenv("WEBVIEW_DEBUG") == "1")

if __name__ == "__main__":
    main()
