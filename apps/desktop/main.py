import logging
import signal
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from modeldash.core.logging_ import setup_logging
from modeldash.shared.config import apply_env_overrides
from modeldash.shared.paths import ensure_app_dirs
from modeldash.shared.store import ConfigStore
from .ui.window import MainWindow

log = logging.getLogger(__name__)


def main() -> None:
    ensure_app_dirs()
    setup_logging()

    store = ConfigStore()
    cfg = apply_env_overrides(store.load())
    log.info("Loaded config from %s", store.path())

    app = QApplication(sys.argv)
    win = MainWindow(cfg)
    win.show()

    # Ctrl+C closes the window, which stops the dashboard timers and socket
    def signal_handler(sig, frame):
        log.info("Received interrupt signal, shutting down")
        win.close()

    if hasattr(signal, "SIGINT"):
        signal.signal(signal.SIGINT, signal_handler)

    # Python signal handlers only run when the interpreter gets control back
    wakeup = QTimer()
    wakeup.timeout.connect(lambda: None)
    wakeup.start(250)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
