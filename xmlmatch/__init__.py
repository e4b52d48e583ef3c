"""xmlmatch command-line application."""
