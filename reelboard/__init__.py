"""
Reelboard

Content pipeline tracker for a short-form video creator: content records,
CSV metric imports, caption generation, platform metric sync, analytics
and deadline reminders.
"""

__version__ = "0.1.0"
