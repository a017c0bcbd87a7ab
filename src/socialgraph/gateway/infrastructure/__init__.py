"""Infrastructure adapters for the Gateway bounded context."""

from gateway.infrastructure.channels import InProcessQueryChannel

__all__ = ["InProcessQueryChannel"]
