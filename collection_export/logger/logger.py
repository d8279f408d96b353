# logger.py
import logging
import sys
from typing import Union


class Logger:
    """Class-level logger shared by the exporters."""

    _logger = None
    _handler = None

    @classmethod
    def setup(
            cls,
            name: str = "collection_export",
            level: Union[int, str] = logging.INFO
    ) -> None:
        """
        Configure the export logger; later calls only change its level.

        Args:
            name: Logger name used on first setup
            level: Level number or name like 'DEBUG'
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO

        if cls._logger is not None:
            cls._logger.setLevel(level)
            return

        cls._logger = logging.getLogger(name)
        cls._logger.setLevel(level)

        cls._handler = logging.StreamHandler(sys.stdout)
        cls._handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        cls._logger.addHandler(cls._handler)

    @classmethod
    def reset(cls) -> None:
        """Detach the handler so the next setup starts fresh."""
        if cls._logger is not None and cls._handler is not None:
            cls._logger.removeHandler(cls._handler)
        cls._logger = None
        cls._handler = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        if cls._logger is None:
            cls.setup()
        return cls._logger

    @classmethod
    def info(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().info(msg, *args, **kwargs)

    @classmethod
    def warning(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().warning(msg, *args, **kwargs)

    @classmethod
    def error(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().error(msg, *args, **kwargs)

    @classmethod
    def debug(cls, msg: str, *args, **kwargs) -> None:
        cls.get_logger().debug(msg, *args, **kwargs)
