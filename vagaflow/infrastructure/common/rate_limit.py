"""Shared request rate limiter for the auth endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from vagaflow.feature_flags import is_rate_limiting_enabled

limiter = Limiter(key_func=get_remote_address, enabled=is_rate_limiting_enabled())
