"""A small scene-based 2D game engine built on pygame: points, collision checks, groups, scenes, resources, audio and a game loop."""

__version__ = "0.1.0"