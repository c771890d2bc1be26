"""Version 1 of the books API."""
