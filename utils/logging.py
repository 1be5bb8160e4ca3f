"""
utils/logging.py

Централизованная система логирования решателя Chomp.
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SolverLogger:
    """Логгер для решателей."""

    def __init__(self, name: str = "chomp_solver", level: int = logging.INFO):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger(name: str = "chomp_solver", level: int = logging.INFO) -> SolverLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования

    Returns:
        SolverLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "chomp_solver.log", level: int = logging.INFO) -> logging.Handler:
    """
    Настраивает логирование в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования

    Returns:
        Добавленный FileHandler (чтобы его можно было закрыть)
    """
    logger = get_logger()

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.logger.addHandler(file_handler)
    return file_handler
