"""
Analytics module for Travel Bot

Thin wrapper around PostHog for widget usage events.
"""

from .posthog_client import get_posthog_client, capture_event

__all__ = ["get_posthog_client", "capture_event"]
