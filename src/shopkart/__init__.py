"""Shopkart product catalog service.

This package contains the catalog domain (entities, validation, repository),
the product service, the HTTP API and the runtime plumbing (configuration,
database sessions, logging).
"""

__version__ = "0.1.0"
