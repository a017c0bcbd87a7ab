"""Application layer for the Gateway bounded context."""

from gateway.application.converter import ResultConverter
from gateway.application.dispatcher import ChannelDispatcher
from gateway.application.gateway import QueryGateway
from gateway.application.observability import DefaultGatewayProbe, GatewayProbe
from gateway.application.options import translate_options, with_default_sort
from gateway.application.query_builder import QueryBuilder, strip_nulls

__all__ = [
    "ChannelDispatcher",
    "DefaultGatewayProbe",
    "GatewayProbe",
    "QueryBuilder",
    "QueryGateway",
    "ResultConverter",
    "strip_nulls",
    "translate_options",
    "with_default_sort",
]
