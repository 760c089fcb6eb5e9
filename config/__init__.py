"""Top-level package for Django configuration.

This package holds the settings modules for the different environments,
the URL configuration, the WSGI/ASGI entry points and the store container
that wires repositories into the room registry and booking ledger.
"""
