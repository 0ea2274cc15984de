"""Entrypoints layer - Wiring for embedding applications.

This layer contains:
- Bootstrap: Builds the charge and cancel use cases from settings and
  configures logging at startup

HTTP routing stays in the embedding application, which calls the
use cases built here.
"""

from gateway_core.entrypoints.bootstrap import (
    build_cancel_use_case,
    build_charge_use_case,
    setup_logging,
)

__all__ = [
    "build_cancel_use_case",
    "build_charge_use_case",
    "setup_logging",
]
