"""
Ingestion layer for calendar event data.

Key Components:
- loader: Reads the grouped-event JSON file into CalendarEvent models
- filtering: Event type / canonical venue filtering for the calendar
"""
