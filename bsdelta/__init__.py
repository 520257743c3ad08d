"""Binary delta encoding: create and apply ENDSLEY/BSDIFF43 patches."""

__version__ = "0.1.0"
__all__ = ["cli", "diff", "fileformat", "offsets", "patch", "suffix"]