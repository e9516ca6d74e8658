"""Display components for terminal output.

Modules:
    colors: Terminal color handling and detection
"""

from deploy_notify.display.colors import Colors, disable_colors, init_colors, supports_color

__all__ = [
    "Colors",
    "supports_color",
    "disable_colors",
    "init_colors",
]
