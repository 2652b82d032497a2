"""hookstrap: bootstrap a multi-language pre-commit development environment.

See `hookstrap --help` for details.
"""

__version__ = "0.1.0"
