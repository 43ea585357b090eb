"""
Email Router - AI-assisted email classification and routing.

Classifies raw email text with Google Gemini into a category, priority,
suggested recipient and summary, drafts replies, extracts action items,
and keeps a local history of classifications.
"""

__version__ = "1.0.0"
