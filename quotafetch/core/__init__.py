"""Core Application Layer.

Orchestrates the use cases exposed on the command line, using domain
interfaces implemented by the infrastructure layer.
"""
