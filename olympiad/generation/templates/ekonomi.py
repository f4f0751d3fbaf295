"""Economics (Ekonomi) templates for SMA."""
from __future__ import annotations

from olympiad.core.models import Level, Subject
from olympiad.core.random_source import RandomSource, rand_int
from olympiad.generation.templates.base import Fact, TemplateResult, fact_result, template

EKONOMI_FACTS: tuple[Fact, ...] = (
    Fact(
        "Hukum permintaan menyatakan bahwa jika harga naik maka?",
        "Permintaan turun",
        ("Permintaan naik", "Permintaan tetap", "Penawaran turun"),
    ),
    Fact("Bank sentral Indonesia adalah?", "Bank Indonesia", ("Bank BRI", "Bank Mandiri", "OJK")),
    Fact(
        "GDP adalah singkatan dari?",
        "Gross Domestic Product",
        ("General Development Plan", "Growth Domestic Percentage", "Grand Domestic Price"),
    ),
    Fact(
        "Inflasi adalah?",
        "Kenaikan harga secara umum",
        ("Penurunan harga", "Kenaikan produksi", "Penurunan pendapatan"),
    ),
    Fact("Pajak yang dikenakan pada barang dan jasa disebut?", "PPN", ("PPh", "PBB", "Cukai")),
)


@template(Level.SMA, Subject.EKONOMI, signature_prefix="eko-")
def revenue(rng: RandomSource) -> TemplateResult:
    price = rand_int(rng, 5, 50) * 1000
    qty = rand_int(rng, 10, 100)
    total = price * qty
    return TemplateResult(
        question_text=(
            f"Sebuah toko menjual barang seharga Rp{price:,} per unit, terjual {qty} unit. "
            "Berapa total pendapatan?"
        ),
        answer=total,
        explanation=f"Total = harga × jumlah = Rp{price:,} × {qty} = Rp{total:,}",
        signature_base=f"eko-rev-{price}-{qty}",
    )


@template(Level.SMA, Subject.EKONOMI, signature_prefix="eko-")
def ekonomi_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, EKONOMI_FACTS, "eko", max_len=10)
