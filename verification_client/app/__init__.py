"""
Identity verification client.

Talks to the remote verification service over HTTP and normalizes the
NIC verification responses into a single outcome shape.
"""

from .client import VerificationClient, create_client

__all__ = ["VerificationClient", "create_client"]
