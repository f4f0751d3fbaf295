"""
Question template library.

Each subject module registers its templates with the @template decorator.
Templates:
- take a RandomSource, return a TemplateResult
- read no engine state
- encode only the drawn parameters in signature_base

Unknown (level, subject) pairs fall back to DEFAULT_PAIR's templates.
"""

from olympiad.core.models import Level, Subject

from .base import (
    Fact,
    Template,
    TemplateResult,
    is_generated_signature,
    registered_pairs,
    template,
    templates_for,
)

# Import template modules to trigger registration
from . import matematika
from . import ipa
from . import ips
from . import fisika
from . import kimia
from . import biologi
from . import informatika
from . import ekonomi
from . import ilmu_bumi

DEFAULT_PAIR = (Level.SMP, Subject.MATEMATIKA)
DEFAULT_TEMPLATES: tuple[Template, ...] = templates_for(*DEFAULT_PAIR)

__all__ = [
    "DEFAULT_PAIR",
    "DEFAULT_TEMPLATES",
    "Fact",
    "Template",
    "TemplateResult",
    "is_generated_signature",
    "registered_pairs",
    "template",
    "templates_for",
]
