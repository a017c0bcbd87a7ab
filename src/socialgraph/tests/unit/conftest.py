"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from gateway.application.gateway import QueryGateway
from gateway.application.observability import GatewayProbe
from gateway.domain.value_objects import SecurityContext
from social.application.enricher import PersonEnricher
from social.application.notifier import EventNotifier
from social.ports.event_sink import EventSink


@pytest.fixture
def context():
    """Security context with horst viewing john's resources."""
    return SecurityContext(viewer_id="horst", owner_id="john")


@pytest.fixture
def mock_channel():
    """Provide a channel whose send() is awaitable and records queries."""
    return AsyncMock()


@pytest.fixture
def mock_gateway_probe():
    """Create a mock gateway probe."""
    return create_autospec(GatewayProbe, instance=True)


@pytest.fixture
def gateway(mock_channel, mock_gateway_probe):
    """Query gateway over the mock channel."""
    return QueryGateway(mock_channel, probe=mock_gateway_probe)


@pytest.fixture
def enricher():
    """Person enricher with both URL templates configured."""
    return PersonEnricher(
        profile_url_template="https://x/${ID}",
        info_url_template="https://info/${ID}",
    )


@pytest.fixture
def mock_sink():
    """Create a mock event sink."""
    return create_autospec(EventSink, instance=True)


@pytest.fixture
def notifier(mock_sink):
    """Enabled event notifier delivering to the mock sink."""
    return EventNotifier(mock_sink, enabled=True)

