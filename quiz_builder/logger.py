"""Logger - Configuracao de logging do quiz builder."""

import logging

ROOT_LOGGER_NAME = "quiz_builder"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Retorna logger filho de ``quiz_builder``.

    Args:
        name: Nome curto do componente (ex.: "editor", "session")

    Returns:
        Logger ``quiz_builder.<name>``
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO") -> None:
    """Configura handler e nivel do logger raiz do pacote."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper())

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
