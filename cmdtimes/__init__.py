"""
cmdtimes - rank labeled timing lines (`<label> -> <duration>`) read from stdin.
"""

from cmdtimes.__version__ import __version__

__all__ = ["__version__"]
