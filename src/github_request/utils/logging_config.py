"""日志配置模块

日志统一写到 stderr，stdout 只留给命令行输出的响应内容。
"""

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 第三方库的连接日志只在 WARNING 及以上输出
NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None):
    """配置日志系统

    Args:
        level: 日志级别（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        stream: 输出流（默认 sys.stderr）

    Returns:
        根日志记录器
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    return root_logger
