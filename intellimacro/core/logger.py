"""
Structured logging for the IntelliMacro service.
"""
import logging
import sys

# Cap on how much of a bad AI reply gets written to the log
MAX_LOGGED_RESPONSE_CHARS = 2000


def setup_logger(name: str = "intellimacro") -> logging.Logger:
    """
    Create a configured logger instance.

    Args:
        name: Logger name for identification

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)

    # Console handler with formatting
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


# Global logger instance
logger = setup_logger()


def log_request(endpoint: str, method: str = "POST") -> None:
    """Log incoming API request."""
    logger.info(f"Request: {method} {endpoint}")


def log_response(endpoint: str, status: str, duration_ms: float = None) -> None:
    """Log API response with optional duration."""
    msg = f"Response: {endpoint} -> {status}"
    if duration_ms:
        msg += f" ({duration_ms:.0f}ms)"
    logger.info(msg)


def log_error(context: str, error: Exception) -> None:
    """Log error with context."""
    logger.error(f"Error in {context}: {type(error).__name__}: {str(error)}")


def log_ai_call(operation: str, model: str) -> None:
    """Log OpenAI API call."""
    logger.info(f"AI Call: {operation} using {model}")


def log_invalid_response(context: str, raw_text: str | None) -> None:
    """Log the raw text of an AI reply that could not be decoded."""
    text = raw_text if raw_text is not None else "<empty>"
    if len(text) > MAX_LOGGED_RESPONSE_CHARS:
        text = text[:MAX_LOGGED_RESPONSE_CHARS] + "...[truncated]"
    logger.error(f"Invalid AI response in {context}: {text!r}")
