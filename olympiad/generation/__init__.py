"""Procedural question generation: templates, option building, batches.

Usage:
    from olympiad.generation import ProceduralGenerator

    gen = ProceduralGenerator()
    batch = gen.generate_question_batch(Level.SMP, Subject.MATEMATIKA, 5)
"""
from olympiad.generation.generator import BatchResult, ProceduralGenerator
from olympiad.generation.options import OptionSet, format_number, numeric_options, string_options

__all__ = [
    "BatchResult",
    "OptionSet",
    "ProceduralGenerator",
    "format_number",
    "numeric_options",
    "string_options",
]
