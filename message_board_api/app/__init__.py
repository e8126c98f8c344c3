"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage and errors),
``api`` (versioned routers), ``schemas`` (request and response
models) and ``services`` (domain logic between routes and storage).
"""

from .main import app  # noqa: F401
