from __future__ import annotations


class StepPolicyError(RuntimeError):
    """Raised when a tick step function fails to produce a coarser spacing."""
