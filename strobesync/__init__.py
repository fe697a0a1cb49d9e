"""Bounded ring buffers and single/multi-producer channels."""

__version__ = "0.1.0"
__all__ = ["ring_buffer", "mpsc", "spsc"]