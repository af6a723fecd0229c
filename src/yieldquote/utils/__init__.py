"""Utilities shared by the provider implementations"""

from .retry_call import DEFAULT_READ_RETRY_COUNT, is_transient_read_error, retry_call
