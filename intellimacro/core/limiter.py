"""
Rate limiter configuration.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from intellimacro.core.config import settings

# Rate limiter, keyed on client IP
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
