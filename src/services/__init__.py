"""Business logic services used by handlers.

Handlers reach the parking service through handlers.dependencies, which
builds it lazily so importing a handler never opens a DynamoDB connection.
"""

# Do NOT import services here - use lazy loading in handlers instead
