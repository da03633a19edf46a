"""Application-level constants."""

# CLI result strings
MATCH_TEXT = "MATCH"
NO_MATCH_TEXT = "NO MATCH"

# CLI exit codes
EXIT_MATCH = 0
EXIT_NO_MATCH = 1
