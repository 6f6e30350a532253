# Terminal Snake Source Package
"""
Terminal Snake - a snake game rendered in character cells.

Modules:
- core: Abstract interfaces for the host (keyboard, canvas, app loop)
- games: Game implementations (Snake)
- terminal: Curses-backed host implementation
- utils: Configuration and utilities
"""
