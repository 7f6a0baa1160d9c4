"""projc -- scaffold a C project with lib/src/test/include and Makefiles."""

__version__ = "0.1.0"
