"""
Utility decorators for run logging.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger


F = TypeVar("F", bound=Callable[..., Any])


def _describe_argument(value: Any) -> Any:
    """Serialize an argument value for logging."""
    if hasattr(value, "name") and hasattr(value, "analyze"):
        return value.name  # Strategy instances
    if hasattr(value, "value") and hasattr(value, "name"):
        return str(value.value)  # Enum values
    if isinstance(value, list | tuple):
        return f"{type(value).__name__}[{len(value)}]"
    return value


def _extract_run_context(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    """Build the logging context for a run from its bound arguments."""
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    context: dict[str, Any] = {"correlation_id": str(uuid.uuid4())[:8]}
    for param_name, value in bound_args.arguments.items():
        if param_name == "self":
            continue
        context[param_name] = _describe_argument(value)
    return context


def _create_success_context(
    base_context: dict[str, Any], execution_time_ms: float, result: Any
) -> dict[str, Any]:
    """Create success logging context."""
    success_context = {
        **base_context,
        "success": True,
        "execution_time_ms": round(execution_time_ms, 2),
        "result_type": type(result).__name__,
    }
    if hasattr(result, "total_return"):
        success_context["total_return"] = round(result.total_return, 4)
    return success_context


def log_run(func: F) -> F:
    """Decorator to log a simulation run with a correlation ID and timing."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        context = _extract_run_context(func, args, kwargs)
        func_name = func.__name__

        with logger.contextualize(correlation_id=context["correlation_id"]):
            logger.bind(**context).debug(f"Run started: {func_name}")
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                execution_time_ms = (time.perf_counter() - start_time) * 1000
                logger.bind(**context, success=False, execution_time_ms=round(execution_time_ms, 2)).error(
                    f"Run failed: {func_name} ({type(e).__name__}: {e})"
                )
                raise
            execution_time_ms = (time.perf_counter() - start_time) * 1000
            logger.bind(**_create_success_context(context, execution_time_ms, result)).success(
                f"Run completed: {func_name} in {execution_time_ms:.1f}ms"
            )
            return result

    return wrapper  # type: ignore
