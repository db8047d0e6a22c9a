"""Convenience exports for application schemas."""

from __future__ import annotations

from .registration import HealthSchema, RegisterSchema, RegistrationResultSchema

__all__ = [
    "HealthSchema",
    "RegisterSchema",
    "RegistrationResultSchema",
]
