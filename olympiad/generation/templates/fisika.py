"""Physics (Fisika) templates for SMA."""
from __future__ import annotations

from olympiad.core.models import DiagramKind, DiagramSpec, Level, Subject
from olympiad.core.random_source import RandomSource, rand_int
from olympiad.generation.templates.base import TemplateResult, num, round_half_up, template


@template(Level.SMA, Subject.FISIKA, signature_prefix="fis-")
def newton_second_law(rng: RandomSource) -> TemplateResult:
    m = rand_int(rng, 2, 30)
    a = rand_int(rng, 1, 15)
    f = m * a
    return TemplateResult(
        question_text=(
            f"Sebuah benda bermassa {m} kg diberi percepatan {a} m/s². "
            "Berapakah gaya yang bekerja pada benda?"
        ),
        answer=f,
        explanation=f"Hukum Newton II: F = m × a = {m} × {a} = {f} N",
        diagram=DiagramSpec(DiagramKind.BLOCK_FORCE, {"mass": m, "force": f}),
        signature_base=f"fis-newton-m{m}-a{a}",
    )


@template(Level.SMA, Subject.FISIKA, signature_prefix="fis-")
def accelerated_motion(rng: RandomSource) -> TemplateResult:
    v0 = rand_int(rng, 0, 20)
    a = rand_int(rng, 1, 10)
    t = rand_int(rng, 1, 10)
    v = v0 + a * t
    return TemplateResult(
        question_text=(
            f"Benda bergerak dengan v₀ = {v0} m/s, a = {a} m/s², selama t = {t} s. "
            "Berapa kecepatan akhirnya?"
        ),
        answer=v,
        explanation=f"v = v₀ + at = {v0} + {a}×{t} = {v} m/s",
        signature_base=f"fis-glbb-v{v0}-a{a}-t{t}",
    )


@template(Level.SMA, Subject.FISIKA, signature_prefix="fis-")
def kinetic_energy(rng: RandomSource) -> TemplateResult:
    m = rand_int(rng, 1, 20)
    v = rand_int(rng, 2, 15)
    ek = 0.5 * m * v * v
    return TemplateResult(
        question_text=f"Benda bermassa {m} kg bergerak dengan kecepatan {v} m/s. Berapa energi kinetiknya?",
        answer=ek,
        explanation=f"Ek = ½mv² = ½ × {m} × {v}² = {num(ek)} J",
        diagram=DiagramSpec(DiagramKind.BLOCK_FORCE, {"mass": m, "force": v}),
        signature_base=f"fis-ek-m{m}-v{v}",
    )


@template(Level.SMA, Subject.FISIKA, signature_prefix="fis-")
def gravitation(rng: RandomSource) -> TemplateResult:
    m1 = rand_int(rng, 1, 10)
    m2 = rand_int(rng, 1, 10)
    r = rand_int(rng, 1, 5)
    f = round_half_up(667 * m1 * m2 / (r * r))
    return TemplateResult(
        question_text=(
            f"Dua benda bermassa {m1} kg dan {m2} kg berjarak {r} m. Berapa gaya gravitasi? "
            "(G = 6.67 × 10⁻¹¹, jawab dalam ×10⁻¹¹ N)"
        ),
        answer=f,
        explanation=f"F = G×m₁×m₂/r² = 6.67×10⁻¹¹ × {m1} × {m2} / {r}² = {f} × 10⁻¹¹ N",
        signature_base=f"fis-grav-{m1}-{m2}-{r}",
    )


@template(Level.SMA, Subject.FISIKA, signature_prefix="fis-")
def pressure_force(rng: RandomSource) -> TemplateResult:
    p = rand_int(rng, 100, 1000)
    area = rand_int(rng, 1, 20)
    f = p * area
    return TemplateResult(
        question_text=f"Tekanan {p} Pa bekerja pada luas {area} m². Berapa gayanya?",
        answer=f,
        explanation=f"F = P × A = {p} × {area} = {f} N",
        signature_base=f"fis-tekanan-{p}-{area}",
    )


@template(Level.SMA, Subject.FISIKA, signature_prefix="fis-")
def work(rng: RandomSource) -> TemplateResult:
    f = rand_int(rng, 100, 2000)
    s = rand_int(rng, 1, 20)
    w = f * s
    return TemplateResult(
        question_text=f"Gaya {f} N memindahkan benda sejauh {s} m. Berapa usahanya?",
        answer=w,
        explanation=f"W = F × s = {f} × {s} = {w} J",
        diagram=DiagramSpec(DiagramKind.BLOCK_FORCE, {"mass": round_half_up(f / 10), "force": f}),
        signature_base=f"fis-usaha-{f}-{s}",
    )
