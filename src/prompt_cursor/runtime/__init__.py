"""Runtime services shared by the cursor core and its adapters."""

from . import telemetry

__all__ = ["telemetry"]
