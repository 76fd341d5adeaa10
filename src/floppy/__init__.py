"""Floppy - a one-button arcade game about a bird and some pipes."""

__version__ = "0.1.0"
