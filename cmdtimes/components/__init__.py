"""
Components package.

Stateless domain operations used by workflows and services.
"""
