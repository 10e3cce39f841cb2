"""
Debug logging utility with timing support

Prints one-line traces for routes, the conversation and the bot client,
with elapsed request time when a request is available.
"""

import time
import os
from typing import Optional
from fastapi import Request


class DebugLogger:
    """Centralized debug logging with timing support"""

    def __init__(self):
        # Lambda (production) and local runs are switched separately
        if os.getenv("AWS_LAMBDA_FUNCTION_NAME") is not None:
            flag = "DEBUG_LOGGING_PROD"
        else:
            flag = "DEBUG_LOGGING_DEV"
        self.debug_enabled = os.getenv(flag, "false").lower() == "true"

    def format(self,
               request_id: str,
               service: str,
               message: str,
               request: Optional[Request] = None,
               **kwargs) -> str:
        """
        Build a debug line

        Format: [DEBUG] [service] [elapsed] [request_id] message [key=value ...]
        """
        timing_part = ""
        if request is not None and hasattr(request.state, "start_time"):
            timing_part = f" [{time.perf_counter() - request.state.start_time:.3f}s]"
        context_part = f" [{request_id}]" if request_id else ""
        extra = ""
        if kwargs:
            extra = " " + " ".join(f"{k}={v}" for k, v in kwargs.items())
        return f"[DEBUG] [{service}]{timing_part}{context_part} {message}{extra}"

    def log(self,
            request_id: str,
            service: str,
            message: str,
            request: Optional[Request] = None,
            **kwargs) -> None:
        if not self.debug_enabled:
            return
        print(self.format(request_id, service, message, request, **kwargs))

    def log_route(self, request_id: str, message: str, request: Optional[Request] = None, **kwargs):
        """Log a route-related debug message"""
        self.log(request_id, "ROUTE", message, request, **kwargs)

    def log_chat(self, request_id: str, message: str, request: Optional[Request] = None, **kwargs):
        """Log a conversation debug message"""
        self.log(request_id, "CHAT", message, request, **kwargs)

    def log_lex(self, request_id: str, message: str, request: Optional[Request] = None, **kwargs):
        """Log a Lex client debug message"""
        self.log(request_id, "LEX", message, request, **kwargs)

    def log_timing(self, request_id: str, operation: str, duration_ms: float, **kwargs):
        """Log a specific timing measurement"""
        self.log(request_id, "TIMING", f"{operation} completed in {duration_ms:.3f}ms", **kwargs)


# Global debug logger instance
debug_logger = DebugLogger()
