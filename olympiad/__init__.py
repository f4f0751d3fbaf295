"""
Olympiad question engine.

Produces multiple-choice quiz sessions for SMP/SMA olympiad practice by
mixing a curated question bank with procedurally generated questions,
excluding everything a user has already answered.
"""

__version__ = "1.0.0"
