"""Request-rate governance.

Contains the window rate limiter and the RESTGetter decorator that puts it
in front of any other getter.
"""
