"""Chemistry (Kimia) templates for SMA."""
from __future__ import annotations

from olympiad.core.models import Level, Subject
from olympiad.core.random_source import RandomSource, rand_int
from olympiad.generation.templates.base import Fact, TemplateResult, fact_result, template

KIMIA_FACTS: tuple[Fact, ...] = (
    Fact("Berapa nomor atom Karbon?", "6", ("8", "12", "14")),
    Fact("Berapa nomor atom Oksigen?", "8", ("6", "16", "10")),
    Fact("Apa rumus kimia air?", "H₂O", ("CO₂", "NaCl", "H₂SO₄")),
    Fact("Apa rumus kimia garam dapur?", "NaCl", ("KCl", "CaCl₂", "MgCl₂")),
    Fact("Gas mulia yang paling ringan adalah?", "Helium", ("Neon", "Argon", "Kripton")),
    Fact("pH larutan netral adalah?", "7", ("0", "14", "1")),
    Fact("Unsur dengan simbol Fe adalah?", "Besi", ("Emas", "Perak", "Tembaga")),
    Fact("Berapa jumlah elektron valensi Natrium (Na)?", "1", ("2", "3", "7")),
    Fact("Ikatan antara logam dan non-logam disebut ikatan?", "Ionik", ("Kovalen", "Logam", "Hidrogen")),
    Fact("Reaksi yang melepas panas disebut reaksi?", "Eksoterm", ("Endoterm", "Redoks", "Substitusi")),
)


@template(Level.SMA, Subject.KIMIA, signature_prefix="kim-")
def kimia_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, KIMIA_FACTS, "kim")


@template(Level.SMA, Subject.KIMIA, signature_prefix="kim-")
def molar_mass(rng: RandomSource) -> TemplateResult:
    mol = rand_int(rng, 1, 10)
    mass = mol * 18
    return TemplateResult(
        question_text=f"Berapa gram massa {mol} mol air (H₂O)? (Mr H₂O = 18)",
        answer=mass,
        explanation=f"m = n × Mr = {mol} × 18 = {mass} gram",
        signature_base=f"kim-mol-{mol}",
    )
