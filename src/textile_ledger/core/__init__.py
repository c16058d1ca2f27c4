"""Core domain layer - entities, derivation services, and exceptions."""

from textile_ledger.core import entities, exceptions, services

__all__ = ["entities", "services", "exceptions"]
