"""Event dispatch.

Routes a webhook event through every registered handler with per-handler
error isolation and structured results.
"""

from .models import DispatchResult, HandlerRun
from .registry import EventDispatcher, Handler

__all__ = [
    "EventDispatcher",
    "Handler",
    "DispatchResult",
    "HandlerRun",
]
