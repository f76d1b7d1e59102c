"""
Structured logging configuration with correlation IDs and performance timing.
"""
import logging
import sys
import time
import uuid
from typing import Any, Dict, Optional
from contextlib import contextmanager
from contextvars import ContextVar
import structlog

from call_assist import __version__

# Context variables for request-scoped data
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
customer_id_var: ContextVar[Optional[str]] = ContextVar('customer_id', default=None)
agent_id_var: ContextVar[Optional[str]] = ContextVar('agent_id', default=None)

operation_name_var: ContextVar[Optional[str]] = ContextVar('operation_name', default=None)
operation_start_var: ContextVar[Optional[float]] = ContextVar('operation_start', default=None)


def add_correlation_id(
    logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add correlation ID to log events."""
    correlation_id = correlation_id_var.get()
    if not correlation_id:
        correlation_id = str(uuid.uuid4())[:8]
        correlation_id_var.set(correlation_id)

    event_dict.setdefault("correlation_id", correlation_id)
    return event_dict


def add_request_context(
    logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add request context information to log events."""
    customer_id = customer_id_var.get()
    if customer_id:
        event_dict.setdefault("customer_id", customer_id)

    agent_id = agent_id_var.get()
    if agent_id:
        event_dict.setdefault("agent_id", agent_id)

    return event_dict


def add_service_context(
    logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add service context to log events."""
    event_dict["service"] = "call-assist"
    event_dict["version"] = __version__
    return event_dict


def add_performance_context(
    logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add performance timing context to log events."""
    operation_start = operation_start_var.get()
    if operation_start is not None:
        duration = time.time() - operation_start
        event_dict["operation_duration_ms"] = round(duration * 1000, 2)

    operation_name = operation_name_var.get()
    if operation_name:
        event_dict.setdefault("operation", operation_name)

    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging.

    Args:
        log_level: Minimum level for the stdlib root logger
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context,
        add_request_context,
        add_correlation_id,
        add_performance_context,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def get_business_logger() -> structlog.stdlib.BoundLogger:
    """Get a business event logger instance."""
    return structlog.get_logger("business")


def get_performance_logger() -> structlog.stdlib.BoundLogger:
    """Get a performance logger instance."""
    return structlog.get_logger("performance")


def get_correlation_id() -> Optional[str]:
    """Get correlation ID from current context."""
    return correlation_id_var.get()


@contextmanager
def correlation_context(correlation_id: str = None, customer_id: str = None,
                        agent_id: str = None):
    """
    Context manager for setting correlation context.

    Args:
        correlation_id: Correlation ID for the request
        customer_id: Account being worked on
        agent_id: Collections agent making the request
    """
    tokens = []
    if correlation_id:
        tokens.append((correlation_id_var, correlation_id_var.set(correlation_id)))
    if customer_id:
        tokens.append((customer_id_var, customer_id_var.set(customer_id)))
    if agent_id:
        tokens.append((agent_id_var, agent_id_var.set(agent_id)))

    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


@contextmanager
def performance_timing(operation_name: str):
    """
    Context manager for timing operations.

    Args:
        operation_name: Name of the operation being timed
    """
    start_time = time.time()
    name_token = operation_name_var.set(operation_name)
    start_token = operation_start_var.set(start_time)

    logger = get_performance_logger()
    logger.debug("Operation started", operation=operation_name)

    try:
        yield

    finally:
        duration = time.time() - start_time
        duration_ms = round(duration * 1000, 2)

        logger.info(
            "Operation completed",
            operation=operation_name,
            duration_ms=duration_ms,
        )

        operation_start_var.reset(start_token)
        operation_name_var.reset(name_token)


def log_business_event(event_type: str, **kwargs):
    """
    Log a structured business event.

    Args:
        event_type: Type of business event
        **kwargs: Additional event data
    """
    logger = get_business_logger()
    logger.info("Business event", event_type=event_type, **kwargs)


def log_error_with_context(logger, error: Exception, context: Dict[str, Any] = None):
    """Log an error with additional context information."""
    logger.error(
        "Error occurred",
        error_type=type(error).__name__,
        error_message=str(error),
        context=context or {},
    )


def mask_secret(value: Optional[str], visible: int = 4) -> str:
    """Mask a credential for log output."""
    if not value:
        return "undefined"
    return f"{value[:visible]}..."
