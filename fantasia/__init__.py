"""A fantasy clicker role-playing game: entities, widgets, animations and the game loop."""

__version__ = "0.1.0"