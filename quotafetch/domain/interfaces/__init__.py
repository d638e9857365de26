"""Domain Interfaces (Ports):

Defines the contracts (Abstract Base Classes) that infrastructure components
must implement. Callers and decorators depend on these interfaces, not on
concrete implementations.
"""
