"""Social bounded context.

Domain facades over the remote social-graph engine: people, friendships,
groups, messages, activity streams, albums, media items, app data, graph
algorithms, organization hierarchy, skills and process mining.
"""
