"""Gateway ports (interfaces) module.

Ports define the contract between the gateway and the transport that
carries its queries to the remote engine.
"""

from gateway.ports.channel import QueryChannel
from gateway.ports.exceptions import ErrorClassification, GatewayError

__all__ = ["ErrorClassification", "GatewayError", "QueryChannel"]
