"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (Earth radius, ring defaults, WGS 84 bounds)
- exceptions: Custom exception hierarchy
- ingress: Request parameter parsing for HTTP entrypoints
"""
