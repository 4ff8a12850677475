import logging
import os
from datetime import datetime
from contextvars import ContextVar

from e2e_framework.utils.config_loader import cfg_get, load_config, resolve_path

_CURRENT_TEST: ContextVar[str] = ContextVar("CURRENT_TEST", default="-")

LOGGER_NAME = "e2e_logger"


def set_current_test(name: str) -> None:
    """中文：设置当前测试名称上下文。
    参数:
        name: 当前测试名称。
    """

    _CURRENT_TEST.set(name or "-")


def get_current_test() -> str:
    return _CURRENT_TEST.get()


class _InjectContextFilter(logging.Filter):
    """中文：日志过滤器，注入测试名称与页面名称。
    English: Logger filter injecting test and page names into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "test"):
            record.test = _CURRENT_TEST.get()
        if not hasattr(record, "page"):
            record.page = "-"
        return True


def _log_file() -> str:
    cfg = load_config()
    log_dir = resolve_path(cfg, cfg_get(cfg, ["paths", "logs"], "logs"))
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(
        log_dir,
        f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    )


def get_logger() -> logging.Logger:
    """中文：获取全局日志记录器，首次调用时创建控制台与文件处理器。
    English: Return the shared logger, attaching handlers on first use.
    """

    logger = logging.getLogger(LOGGER_NAME)

    if getattr(logger, "_inited", False):
        return logger

    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(test)s | %(page)s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_InjectContextFilter())

    file_handler = logging.FileHandler(_log_file(), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(_InjectContextFilter())

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logger.propagate = False

    logger._inited = True
    return logger


def get_page_logger(page_name: str | None = None):
    """中文：获取页面级日志记录器。
    参数:
        page_name: 页面名称，可为空。
    """

    logger = get_logger()
    if page_name:
        logger = logging.LoggerAdapter(logger, {"page": page_name})
    return logger
