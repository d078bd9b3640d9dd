"""
Reelboard API Module

FastAPI backend providing REST endpoints for:
- Content records (CRUD and CSV import)
- Caption generation
- Platform metric sync, analytics and reminders
"""
