"""Small terminal games (snake, tennis, two tetris variants) and text and number exercises."""

__version__ = "0.1.0"