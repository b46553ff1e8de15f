# ecom/utils/logging.py
import logging
import sys

from ecom.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger("ecom")
    root.addHandler(handler)
    root.setLevel(LOG_LEVEL)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger under the "ecom" hierarchy, configured once per process."""
    _configure_root()
    if not name.startswith("ecom"):
        name = f"ecom.{name}"
    return logging.getLogger(name)
