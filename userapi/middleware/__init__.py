"""HTTP middleware: recovery, access log, timeout.

Applied in main app; order matters (last added = outermost).
Import and use from userapi.main.
"""

from userapi.middleware.access_log import AccessLogMiddleware
from userapi.middleware.recovery import RecoveryMiddleware
from userapi.middleware.timeout import TimeoutMiddleware

__all__ = [
    "AccessLogMiddleware",
    "RecoveryMiddleware",
    "TimeoutMiddleware",
]
