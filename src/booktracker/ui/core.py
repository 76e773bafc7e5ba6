"""Core console configuration and theme for booktracker UI.

This module provides the Rich console instances and theme that the other
UI modules build upon.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

# =============================================================================
# Theme Configuration
# =============================================================================

BOOKTRACKER_THEME = Theme(
    {
        # Status colors
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        # Text styles
        "title": "bold white",
        "dim": "dim",
        # Semantic styles
        "author": "cyan",
        "isbn": "yellow",
        "copies": "green",
    }
)

# =============================================================================
# Console Instances
# =============================================================================

# Primary console for tables and the statistics block
console = Console(theme=BOOKTRACKER_THEME, stderr=False, highlight=False, emoji=False)

# Diagnostic console (stderr)
err_console = Console(theme=BOOKTRACKER_THEME, stderr=True, highlight=False, emoji=False)
