"""Natural science (IPA) templates for SMP."""
from __future__ import annotations

from olympiad.core.models import DiagramKind, DiagramSpec, Level, Subject
from olympiad.core.random_source import RandomSource, rand_int
from olympiad.generation.templates.base import TemplateResult, template


@template(Level.SMP, Subject.IPA, signature_prefix="ipa-")
def newton_force(rng: RandomSource) -> TemplateResult:
    m = rand_int(rng, 2, 20)
    a = rand_int(rng, 1, 10)
    f = m * a
    return TemplateResult(
        question_text=f"Sebuah benda bermassa {m} kg diberi percepatan {a} m/s². Berapakah gaya yang bekerja?",
        answer=f,
        explanation=f"F = m × a = {m} × {a} = {f} N",
        diagram=DiagramSpec(DiagramKind.BLOCK_FORCE, {"mass": m, "force": f}),
        signature_base=f"ipa-newton-m{m}-a{a}",
    )


@template(Level.SMP, Subject.IPA, signature_prefix="ipa-")
def distance(rng: RandomSource) -> TemplateResult:
    v = rand_int(rng, 10, 100)
    t = rand_int(rng, 1, 10)
    s = v * t
    return TemplateResult(
        question_text=f"Sebuah mobil bergerak dengan kecepatan {v} m/s selama {t} detik. Berapakah jarak tempuhnya?",
        answer=s,
        explanation=f"s = v × t = {v} × {t} = {s} m",
        signature_base=f"ipa-jarak-v{v}-t{t}",
    )


@template(Level.SMP, Subject.IPA, signature_prefix="ipa-")
def potential_energy(rng: RandomSource) -> TemplateResult:
    m = rand_int(rng, 1, 15)
    h = rand_int(rng, 2, 20)
    ep = m * 10 * h
    return TemplateResult(
        question_text=f"Benda bermassa {m} kg berada di ketinggian {h} m. Berapakah energi potensialnya? (g = 10 m/s²)",
        answer=ep,
        explanation=f"Ep = m × g × h = {m} × 10 × {h} = {ep} J",
        diagram=DiagramSpec(DiagramKind.BLOCK_FORCE, {"mass": m, "force": ep / 10}),
        signature_base=f"ipa-ep-m{m}-h{h}",
    )


@template(Level.SMP, Subject.IPA, signature_prefix="ipa-")
def wavelength(rng: RandomSource) -> TemplateResult:
    v = rand_int(rng, 200, 400)
    f = rand_int(rng, 100, 1000)
    wl = round(v / f, 2)
    return TemplateResult(
        question_text=(
            f"Sebuah gelombang memiliki kecepatan {v} m/s dan frekuensi {f} Hz. "
            "Berapa panjang gelombangnya?"
        ),
        answer=wl,
        explanation=f"λ = v/f = {v}/{f} = {wl:.2f} m",
        signature_base=f"ipa-wave-v{v}-f{f}",
        spread=1,
    )


@template(Level.SMP, Subject.IPA, signature_prefix="ipa-")
def ohms_law(rng: RandomSource) -> TemplateResult:
    r = rand_int(rng, 2, 20)
    i = rand_int(rng, 1, 10)
    v = i * r
    return TemplateResult(
        question_text=f"Sebuah resistor {r} Ω dialiri arus {i} A. Berapakah tegangan listriknya?",
        answer=v,
        explanation=f"V = I × R = {i} × {r} = {v} Volt",
        signature_base=f"ipa-ohm-r{r}-i{i}",
    )


@template(Level.SMP, Subject.IPA, signature_prefix="ipa-")
def heat(rng: RandomSource) -> TemplateResult:
    m = rand_int(rng, 1, 10)
    d_t = rand_int(rng, 5, 50)
    q = m * 4200 * d_t
    return TemplateResult(
        question_text=(
            f"Air bermassa {m} kg dipanaskan dari 20°C hingga {20 + d_t}°C. "
            "Berapa kalor yang diperlukan? (c = 4200 J/kg°C)"
        ),
        answer=q,
        explanation=f"Q = m × c × ΔT = {m} × 4200 × {d_t} = {q} J",
        signature_base=f"ipa-kalor-m{m}-dT{d_t}",
    )
