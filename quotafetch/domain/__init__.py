"""Domain Layer: retrieval contracts, decode targets and the error taxonomy.

Nothing in here performs I/O. Infrastructure implements the interfaces.
"""
