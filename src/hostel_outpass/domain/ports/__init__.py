"""Ports (interfaces) for the ports-and-adapters architecture."""

from hostel_outpass.domain.ports.gate_service import OutpassGateServicePort
from hostel_outpass.domain.ports.outpass_store import OutpassStore

__all__ = ["OutpassGateServicePort", "OutpassStore"]
