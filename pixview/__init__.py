"""Pixel layouts, image buffers, Pillow and tensor adapters, a one-shot channel and event types."""

__version__ = "0.1.0"