"""Contracts (protocols) shared between application and adapters."""
