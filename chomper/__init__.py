"""A maze-chasing arcade game built on pygame: the maze, the player and the game loop."""

__version__ = "0.1.0"