"""
Core utilities shared across the XUELONG AI API.

This package hosts configuration (``config``), logging setup, credential
checks, the login rate limiter and small helpers. Routers and services depend
on these primitives instead of reading the environment themselves.
"""
