"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the retrieval contracts to the outside world (HTTP transport,
configuration files, console output) by implementing the interfaces defined
in the domain layer.
"""
