"""
Services Package

This package contains logic kept apart from HTTP handling (routers)
so it can be reused by scripts and tested in isolation.

Current services:
- rate_limiter.py: Rate limiting with slowapi
- security.py: Password hashing and JWT utilities
- seed.py: Demo user, categories and books
"""
