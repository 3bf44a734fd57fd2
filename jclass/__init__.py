"""Parse, edit and write Java class files, decode Code attributes and scan class file offsets."""

__version__ = "0.1.7"