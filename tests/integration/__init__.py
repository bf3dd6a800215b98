"""
Integration tests for cmdtimes: the CLI end to end.
"""
