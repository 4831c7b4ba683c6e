"""A prize-ladder quiz game with lifelines, question loading and a pygame front end."""

__version__ = "1.0.0"