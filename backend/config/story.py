"""
Story generation constants for the Bedtime Story Generator.

Reading-speed and layout values shared by the generator, the API and the CLI.
"""

# Story generation constants
STORY_CONSTANTS = {
    "words_per_minute": 200,  # Read-aloud pace used for reading time
    "paragraph_delimiter": "\n\n",  # Display splits content on this
    "child_name_min_length": 2,
    "child_name_max_length": 50,
    "max_accessories": 3,  # Character creation form limit
    "min_template_slots": 4,  # intro, rising action, turn, resolution
    "max_template_slots": 6,
}

WORDS_PER_MINUTE = STORY_CONSTANTS["words_per_minute"]
PARAGRAPH_DELIMITER = STORY_CONSTANTS["paragraph_delimiter"]
