"""
Normalization module for venue names.

This package contains:
- venues.py: Venue name normalization, fuzzy grouping and canonical lookup
- venue_display.py: Display labels and colours resolved through venue groups
"""
