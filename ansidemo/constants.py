"""Constants and configuration defaults for the ANSI demo."""

class DemoConstants:
    """Central configuration constants for the demo."""

    # Window titles
    APP_TITLE = "ANSI Demo"
    RESTORE_TITLE = "Terminal"
    TERMINAL_DEMO_TITLE = "ANSI Demo - Terminal Control"

    # Menu text
    HEADER = "🎨 ANSI Terminal Demo"
    INSTRUCTIONS = "Press arrow keys to navigate, Enter to select, q to quit\n"
    SELECTED_MARKER = "► "
    UNSELECTED_MARKER = "  "
    RETURN_PROMPT = "Press any key to return to menu..."
    FAREWELL = "Thanks for trying the ANSI Demo! 🎉"
    FAREWELL_HINT = "Built on blessed and curtsies."

    # Demo limits
    MAX_INPUT_KEYS = 10  # Key presses captured by the input demo
    MAX_MOUSE_EVENTS = 20  # Mouse events captured by the mouse demo
    FILL_LINES = 20  # Sample lines written by the terminal demo
    PALETTE_SAMPLES = 16  # Palette entries shown by the color demo

    # Pacing (seconds, scaled by DemoConfig.pace)
    SHORT_PAUSE = 1.0
    LONG_PAUSE = 2.0

    # Sample glyphs
    COLOR_BLOCK = "█" * 8
    PALETTE_BLOCK = "█"
