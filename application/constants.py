"""Application-level constants."""

# Keys for JSON output
SOURCE_KEY = "source"
INPUT_KEY = "input"
TAGS_KEY = "tags"
OUTPUT_KEY = "output"

# Source labels
ARGV_SOURCE = "argv"
STDIN_SOURCE = "stdin"
