"""Shared BFF access layer and feature-module composition for client apps."""

__version__ = "0.1.0"
