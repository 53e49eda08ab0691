"""A small arcade engine on pygame, with a steering demo and a falling-block puzzle game."""

__version__ = "0.1.0"