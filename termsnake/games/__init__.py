"""
Games for Terminal Snake.

Each game package exposes its state model, controller, renderer and config.
"""
