"""
Shared utilities for the identity verification client layer.

This package aggregates common building blocks consumed by the client:

- config: Client configuration via pydantic-settings
- logging: Structured logging with request correlation
- errors: Canonical error types and responses
- test_helpers: Fakes and factories used by the test suites

Any cross-package logic should live here to avoid import cycles. Do not
import from verification_client into shared/.
"""
