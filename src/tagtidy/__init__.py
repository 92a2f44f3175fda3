"""tagtidy: rename audio files from their tags and weed out broken ones."""

__version__ = "0.1.0"
