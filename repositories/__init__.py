"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates one piece of bot state or storage:
chat language preferences (in memory) and the JSONL activity log (on disk).
"""
