import logging
import os
from logging.handlers import RotatingFileHandler

logger = logging.getLogger("glmath")

log_file_env:str|None = os.environ.get("LOG_FILE", None)
if log_file_env:
    file_handler = RotatingFileHandler(log_file_env, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)

log_level_env:str|None = os.environ.get("LOG_LEVEL", None)
if log_level_env:
    levels_by_name = logging.getLevelNamesMapping()
    level = levels_by_name[log_level_env.upper()]

    logger.setLevel(level)
    logger.propagate = False
    handler = logging.StreamHandler()

    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)

else:
    logger.setLevel(logging.WARN)

from glmath.vector import Vector
from glmath.vector2 import Vector2
from glmath.vector3 import Vector3
from glmath.vector4 import Vector4

__all__ = [
    "logger",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
]
