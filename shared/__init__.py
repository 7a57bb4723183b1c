"""
Shared utilities for the CFTools client.

This package aggregates the ambient building blocks used by the client
package:

- config: Client configuration via pydantic-settings
- logging: Structured logging via structlog
- metrics: Prometheus cache and HTTP metrics
- errors: Canonical error types

Do not import from cftools_client into shared/.
"""
