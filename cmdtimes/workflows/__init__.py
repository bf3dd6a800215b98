"""
Workflows package.

Use-case loops built from components. Workflows must not import services or
interfaces.
"""
