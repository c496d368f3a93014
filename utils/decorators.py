"""
Decorators for SDK error translation and handler response formatting.
"""
import functools
import uuid
import traceback
from typing import Callable, Any, Dict
from botocore.exceptions import BotoCoreError, ClientError
from logger_config import get_logger
from utils.exceptions import ConfigurationError, NotFoundError, TransmissionError

logger = get_logger(__name__)


def translate_aws_errors(
    service: str,
    operation: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator for methods that issue exactly one AWS SDK call.

    Any botocore failure is re-raised as TransmissionError with the
    original exception attached (and chained). Nothing is retried.

    Args:
        service: AWS service name used in logs and on the error
        operation: SDK operation name used in logs and on the error

    Returns:
        Decorator
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (ClientError, BotoCoreError) as e:
                logger.error(f'{service} {operation} failed: {str(e)}')
                raise TransmissionError(
                    f'{service} {operation} failed: {str(e)}',
                    service=service,
                    operation=operation,
                    original=e
                ) from e
        return wrapper
    return decorator


def describe_error(e: Exception) -> Dict[str, Any]:
    """
    Build the "error" block of a handler response.

    Known job errors carry their context attributes; anything else is
    reported by class name and message only.
    """
    if isinstance(e, TransmissionError):
        body = {
            "type": "TransmissionError",
            "service": e.service,
            "operation": e.operation,
        }
        if isinstance(e.original, ClientError):
            body["code"] = e.original.response.get("Error", {}).get("Code")
    elif isinstance(e, NotFoundError):
        body = {"type": "NotFoundError", "table": e.table, "key": e.key}
    elif isinstance(e, ConfigurationError):
        body = {"type": "ConfigurationError", "setting": e.setting}
    elif isinstance(e, ValueError):
        body = {"type": "ValidationError"}
    else:
        body = {"type": type(e).__name__}
    body["message"] = str(e)
    return body


def lambda_handler(
    func: Callable[[Any, Any], Dict[str, Any]]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for Lambda job entry points.

    Every response carries a correlation ID and the Lambda request ID in
    "metadata". A failure becomes an "error" block built by describe_error
    instead of an exception, so the invocation itself always succeeds.
    Job errors (TransmissionError, NotFoundError, ConfigurationError) are
    logged without a traceback; anything else is logged with one.

    Args:
        func: Handler taking (event, context) and returning a dict

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        metadata = {
            "correlation_id": str(uuid.uuid4()),
            "request_id": getattr(context, "aws_request_id", None),
            "handler": func.__name__,
        }
        log_extra = {"correlation_id": metadata["correlation_id"]}
        logger.info(f"Handler {func.__name__} invoked", extra=log_extra)

        try:
            result = dict(func(event, context) or {})
        except (TransmissionError, NotFoundError, ConfigurationError) as e:
            logger.error(f"Handler {func.__name__} failed: {str(e)}", extra=log_extra)
            return {"error": describe_error(e), "metadata": metadata}
        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed unexpectedly: {str(e)}",
                extra={**log_extra, "traceback": traceback.format_exc()},
                exc_info=True
            )
            return {"error": describe_error(e), "metadata": metadata}

        result["metadata"] = {**result.get("metadata", {}), **metadata}
        logger.info(f"Handler {func.__name__} completed", extra=log_extra)
        return result

    return wrapper
