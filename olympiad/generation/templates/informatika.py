"""Computer science (Informatika) templates for SMA."""
from __future__ import annotations

from olympiad.core.models import Level, Subject
from olympiad.core.random_source import RandomSource, rand_int
from olympiad.generation.templates.base import Fact, TemplateResult, fact_result, template

INFORMATIKA_FACTS: tuple[Fact, ...] = (
    Fact("Bahasa pemrograman yang dikembangkan oleh Google untuk web adalah?", "Dart", ("Swift", "Kotlin", "Ruby")),
    Fact("Struktur data LIFO (Last In First Out) disebut?", "Stack", ("Queue", "Array", "Tree")),
    Fact(
        "Apa singkatan dari HTML?",
        "HyperText Markup Language",
        ("High Tech Machine Learning", "Hyper Transfer Mode Link", "Home Tool Markup Language"),
    ),
    Fact("Berapa bit dalam 1 byte?", "8", ("4", "16", "32")),
    Fact(
        "Algoritma pengurutan yang membandingkan elemen berdekatan disebut?",
        "Bubble Sort",
        ("Quick Sort", "Merge Sort", "Heap Sort"),
    ),
    Fact(
        "Apa itu IP Address?",
        "Alamat unik perangkat di jaringan",
        ("Nama domain website", "Password jaringan", "Kecepatan internet"),
    ),
)


@template(Level.SMA, Subject.INFORMATIKA, signature_prefix="inf-")
def decimal_to_binary(rng: RandomSource) -> TemplateResult:
    n = rand_int(rng, 1, 255)
    binary = format(n, "b")

    # Wrong answers are other random bytes; they must differ from each other and the answer
    others: list[str] = []
    while len(others) < 3:
        candidate = format(rand_int(rng, 1, 255), "b")
        if candidate != binary and candidate not in others:
            others.append(candidate)

    return TemplateResult(
        question_text=f"Konversikan bilangan desimal {n} ke biner!",
        answer=binary,
        explanation=f"{n} dalam biner = {binary}",
        signature_base=f"inf-bin-{n}",
        other_options=tuple(others),
    )


@template(Level.SMA, Subject.INFORMATIKA, signature_prefix="inf-")
def informatika_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, INFORMATIKA_FACTS, "inf", max_len=10)
