"""
Core utilities shared across the contacts API.

This package hosts configuration, logging setup, the response envelope and
the rate-limiting middleware. Routers and services depend on these primitives
instead of reading the environment or building JSON bodies themselves.
"""
