r"""Default values for the retry configuration."""

from __future__ import annotations

__all__ = ["DEFAULT_BASE_DELAY", "DEFAULT_MAX_ATTEMPTS", "RETRY_STATUS_CODES"]

# Default maximum number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Default base delay for exponential waits
# Wait time = base_delay * (2 ** (attempt_number - 1))
# With 0.3: 1st retry waits 0.3s, 2nd waits 0.6s, 3rd waits 1.2s
DEFAULT_BASE_DELAY = 0.3

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
