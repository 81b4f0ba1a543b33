"""A terminal arcade game in the style of Space Invaders, with sound effects."""

__version__ = "0.1.0"