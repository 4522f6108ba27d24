"""Core architecture interfaces and abstractions.

This package contains the contracts, dependency bundles and configuration
classes that let the shell compose feature modules without knowing their
concrete types.
"""
