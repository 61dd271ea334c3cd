"""Zip a file or directory and share it through bashupload.com."""

__version__ = "0.1.0"
