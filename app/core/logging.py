import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настройка логирования для всего процесса"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL пишется в лог только при SQL_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
