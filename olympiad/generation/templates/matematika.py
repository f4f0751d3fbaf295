"""
Mathematics templates for SMP and SMA.

Every signature encodes the drawn parameters only, so the same parameters
always map to the same signature regardless of option order.
"""
from __future__ import annotations

from math import gcd

from olympiad.core.models import DiagramKind, DiagramSpec, Level, Subject
from olympiad.core.random_source import RandomSource, rand_int
from olympiad.generation.templates.base import TemplateResult, num, template

# =============================================================================
# SMP
# =============================================================================


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def triangle_area(rng: RandomSource) -> TemplateResult:
    b = rand_int(rng, 5, 20)
    h = rand_int(rng, 3, 15)
    area = 0.5 * b * h
    return TemplateResult(
        question_text=f"Sebuah segitiga memiliki alas {b} cm dan tinggi {h} cm. Berapakah luas segitiga tersebut?",
        answer=area,
        explanation=f"Luas = ½ × alas × tinggi = ½ × {b} × {h} = {num(area)} cm²",
        diagram=DiagramSpec(DiagramKind.TRIANGLE, {"base": b, "height": h}),
        signature_base=f"mat-tri-b{b}-h{h}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def rectangle_area(rng: RandomSource) -> TemplateResult:
    length = rand_int(rng, 4, 18)
    width = rand_int(rng, 3, 14)
    area = length * width
    return TemplateResult(
        question_text=f"Sebuah persegi panjang memiliki panjang {length} cm dan lebar {width} cm. Berapakah luasnya?",
        answer=area,
        explanation=f"Luas = panjang × lebar = {length} × {width} = {area} cm²",
        diagram=DiagramSpec(DiagramKind.RECTANGLE, {"length": length, "width": width}),
        signature_base=f"mat-rect-l{length}-w{width}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def circle_area(rng: RandomSource) -> TemplateResult:
    r = rand_int(rng, 3, 14)
    area = round(3.14 * r * r, 2)
    return TemplateResult(
        question_text=f"Sebuah lingkaran memiliki jari-jari {r} cm. Berapakah luasnya? (π = 3.14)",
        answer=area,
        explanation=f"Luas = π × r² = 3.14 × {r}² = {area:.2f} cm²",
        diagram=DiagramSpec(DiagramKind.CIRCLE, {"radius": r}),
        signature_base=f"mat-circ-r{r}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def trapezoid_area(rng: RandomSource) -> TemplateResult:
    a = rand_int(rng, 5, 15)
    b = rand_int(rng, 8, 22)
    h = rand_int(rng, 4, 12)
    area = 0.5 * (a + b) * h
    return TemplateResult(
        question_text=(
            f"Sebuah trapesium memiliki sisi sejajar {a} cm dan {b} cm, serta tinggi {h} cm. "
            "Berapakah luasnya?"
        ),
        answer=area,
        explanation=f"Luas = ½ × ({a} + {b}) × {h} = {num(area)} cm²",
        diagram=DiagramSpec(DiagramKind.TRAPEZOID, {"topSide": a, "bottomSide": b, "height": h}),
        signature_base=f"mat-trap-a{a}-b{b}-h{h}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def cuboid_volume(rng: RandomSource) -> TemplateResult:
    p = rand_int(rng, 3, 12)
    lebar = rand_int(rng, 3, 12)
    t = rand_int(rng, 3, 12)
    vol = p * lebar * t
    return TemplateResult(
        question_text=(
            f"Sebuah balok memiliki panjang {p} cm, lebar {lebar} cm, dan tinggi {t} cm. "
            "Berapakah volumenya?"
        ),
        answer=vol,
        explanation=f"Volume = p × l × t = {p} × {lebar} × {t} = {vol} cm³",
        diagram=DiagramSpec(DiagramKind.RECTANGLE, {"length": p, "width": lebar}),
        signature_base=f"mat-balok-{p}-{lebar}-{t}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def multiply_add(rng: RandomSource) -> TemplateResult:
    a = rand_int(rng, 2, 20)
    b = rand_int(rng, 2, 20)
    return TemplateResult(
        question_text=f"Berapakah hasil dari {a} × {b} + {a}?",
        answer=a * b + a,
        explanation=f"{a} × {b} + {a} = {a * b} + {a} = {a * b + a}",
        signature_base=f"mat-arith-{a}-{b}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def linear_equation(rng: RandomSource) -> TemplateResult:
    x = rand_int(rng, 2, 10)
    c = rand_int(rng, 1, 20)
    total = x + c
    return TemplateResult(
        question_text=f"Jika x + {c} = {total}, berapakah nilai x?",
        answer=x,
        explanation=f"x = {total} - {c} = {x}",
        signature_base=f"mat-alg-x{x}-c{c}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def square_perimeter(rng: RandomSource) -> TemplateResult:
    s = rand_int(rng, 3, 15)
    perimeter = 4 * s
    return TemplateResult(
        question_text=f"Sebuah persegi memiliki sisi {s} cm. Berapakah kelilingnya?",
        answer=perimeter,
        explanation=f"Keliling = 4 × sisi = 4 × {s} = {perimeter} cm",
        diagram=DiagramSpec(DiagramKind.RECTANGLE, {"length": s, "width": s}),
        signature_base=f"mat-sq-s{s}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def greatest_common_divisor(rng: RandomSource) -> TemplateResult:
    n1 = rand_int(rng, 10, 50)
    n2 = rand_int(rng, 10, 50)
    fpb = gcd(n1, n2)
    return TemplateResult(
        question_text=f"Berapakah FPB dari {n1} dan {n2}?",
        answer=fpb,
        explanation=f"FPB({n1}, {n2}) = {fpb}",
        signature_base=f"mat-fpb-{n1}-{n2}",
    )


@template(Level.SMP, Subject.MATEMATIKA, signature_prefix="mat-")
def percentage(rng: RandomSource) -> TemplateResult:
    pct = rand_int(rng, 1, 9) * 10
    total = rand_int(rng, 2, 10) * 100
    value = pct * total // 100
    return TemplateResult(
        question_text=f"Berapakah {pct}% dari {total}?",
        answer=value,
        explanation=f"{pct}% × {total} = {pct}/100 × {total} = {value}",
        signature_base=f"mat-pct-{pct}-{total}",
    )


# =============================================================================
# SMA
# =============================================================================


def _signed(value: int) -> str:
    return str(value) if value >= 0 else f"({value})"


@template(Level.SMA, Subject.MATEMATIKA, signature_prefix="mat-")
def discriminant(rng: RandomSource) -> TemplateResult:
    a = rand_int(rng, 1, 5)
    b = rand_int(rng, -10, 10)
    c = rand_int(rng, -20, 5)
    disc = b * b - 4 * a * c
    return TemplateResult(
        question_text=f"Tentukan diskriminan dari persamaan {a}x² + {_signed(b)}x + {_signed(c)} = 0",
        answer=disc,
        explanation=f"D = b² - 4ac = ({b})² - 4({a})({c}) = {b * b} - {4 * a * c} = {disc}",
        signature_base=f"mat-disc-{a}-{b}-{c}",
    )


@template(Level.SMA, Subject.MATEMATIKA, signature_prefix="mat-")
def arithmetic_series(rng: RandomSource) -> TemplateResult:
    n = rand_int(rng, 3, 8)
    a = rand_int(rng, 1, 5)
    d = rand_int(rng, 1, 5)
    total = n / 2 * (2 * a + (n - 1) * d)
    return TemplateResult(
        question_text=f"Hitunglah jumlah {n} suku pertama deret aritmatika dengan a = {a} dan b = {d}!",
        answer=total,
        explanation=f"Sn = n/2 × (2a + (n-1)b) = {n}/2 × (2×{a} + {n - 1}×{d}) = {num(total)}",
        signature_base=f"mat-arit-n{n}-a{a}-d{d}",
    )


@template(Level.SMA, Subject.MATEMATIKA, signature_prefix="sma-")
def triangle_area_sma(rng: RandomSource) -> TemplateResult:
    b = rand_int(rng, 5, 20)
    h = rand_int(rng, 3, 15)
    area = 0.5 * b * h
    return TemplateResult(
        question_text=f"Sebuah segitiga memiliki alas {b} cm dan tinggi {h} cm. Berapakah luas segitiga tersebut?",
        answer=area,
        explanation=f"Luas = ½ × {b} × {h} = {num(area)} cm²",
        diagram=DiagramSpec(DiagramKind.TRIANGLE, {"base": b, "height": h}),
        signature_base=f"sma-tri-b{b}-h{h}",
    )


@template(Level.SMA, Subject.MATEMATIKA, signature_prefix="mat-")
def geometric_term(rng: RandomSource) -> TemplateResult:
    a = rand_int(rng, 2, 6)
    r = rand_int(rng, 2, 4)
    n = rand_int(rng, 3, 6)
    term = a * r ** (n - 1)
    return TemplateResult(
        question_text=f"Suku ke-{n} dari barisan geometri dengan a = {a} dan r = {r} adalah?",
        answer=term,
        explanation=f"Un = a × r^(n-1) = {a} × {r}^{n - 1} = {term}",
        signature_base=f"mat-geo-a{a}-r{r}-n{n}",
    )


@template(Level.SMA, Subject.MATEMATIKA, signature_prefix="mat-")
def cube(rng: RandomSource) -> TemplateResult:
    x = rand_int(rng, 1, 8)
    value = x ** 3
    return TemplateResult(
        question_text=f"Berapakah nilai dari {x}³?",
        answer=value,
        explanation=f"{x}³ = {x} × {x} × {x} = {value}",
        signature_base=f"mat-cube-{x}",
    )


@template(Level.SMA, Subject.MATEMATIKA, signature_prefix="mat-")
def logarithm(rng: RandomSource) -> TemplateResult:
    base = rand_int(rng, 2, 5)
    exp = rand_int(rng, 2, 6)
    power = base ** exp
    return TemplateResult(
        question_text=f"Berapakah log basis {base} dari {power}?",
        answer=exp,
        explanation=f"log_{base}({power}) = {exp}, karena {base}^{exp} = {power}",
        signature_base=f"mat-log-b{base}-e{exp}",
    )
