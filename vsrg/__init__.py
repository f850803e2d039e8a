"""A vertical scrolling rhythm game on pygame, with a BMS chart parser and a small sprite engine."""

__version__ = "0.1.0"