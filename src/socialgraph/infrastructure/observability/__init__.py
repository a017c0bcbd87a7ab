"""Domain-oriented observability infrastructure.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from infrastructure.observability.context import ObservationContext

__all__ = ["ObservationContext"]
