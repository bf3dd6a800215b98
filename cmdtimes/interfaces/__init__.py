"""
Interfaces package.

Outermost layer: parses user input, calls services, renders output.
"""
