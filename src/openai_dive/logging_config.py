"""openai_dive 日志输出

库内各模块只调用 structlog.get_logger()，默认不产生任何 handler。
需要查看请求日志的应用可调用 enable_logging()：它只挂载到 "openai_dive"
这一 logger 层级，不改动 root logger；应用已配置过 structlog 时沿用应用的配置。
"""

import logging
import os

import structlog

LOGGER_NAME = "openai_dive"


class _DiveLogHandler(logging.StreamHandler):
    """enable_logging() 挂载的 handler，重复调用时据此替换"""


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=False)


def enable_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """为 openai_dive 日志挂载输出

    Args:
        level: 日志级别，None 时读取 OPENAI_DIVE_LOG_LEVEL（默认 INFO）
        log_format: "json" 或 "dev"，None 时读取 OPENAI_DIVE_LOG_FORMAT（默认 dev）

    Returns:
        "openai_dive" 标准库 logger
    """
    level = level or os.environ.get("OPENAI_DIVE_LOG_LEVEL", "INFO")
    log_format = log_format or os.environ.get("OPENAI_DIVE_LOG_FORMAT", "dev")

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # structlog 是进程级配置，应用已配置时不覆盖
    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                *pre_chain,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
        )

    handler = _DiveLogHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(log_format),
            foreign_pre_chain=pre_chain,
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if isinstance(existing, _DiveLogHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger
