"""Gateway bounded context.

Turns domain operations into named procedure calls on the remote graph
engine, dispatches them over an injected channel and converts the
untyped answers into typed views.
"""
