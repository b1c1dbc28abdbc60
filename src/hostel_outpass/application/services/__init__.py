"""Application services (use cases) for the security desk."""

from hostel_outpass.application.services.outpass_gate_service import OutpassGateService

__all__ = ["OutpassGateService"]
