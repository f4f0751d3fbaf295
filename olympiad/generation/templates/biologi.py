"""Biology (Biologi) templates for SMA."""
from __future__ import annotations

from olympiad.core.models import Level, Subject
from olympiad.core.random_source import RandomSource
from olympiad.generation.templates.base import Fact, TemplateResult, fact_result, template

BIOLOGI_FACTS: tuple[Fact, ...] = (
    Fact("Organel sel yang berfungsi sebagai pembangkit energi adalah?", "Mitokondria", ("Ribosom", "Lisosom", "Nukleus")),
    Fact("Proses pembelahan sel secara mitosis menghasilkan?", "2 sel anak identik", ("4 sel anak", "1 sel besar", "8 sel anak")),
    Fact("Fotosintesis terjadi di organel?", "Kloroplas", ("Mitokondria", "Ribosom", "Vakuola")),
    Fact("DNA terletak di bagian sel yang disebut?", "Nukleus", ("Sitoplasma", "Membran sel", "Retikulum Endoplasma")),
    Fact("Hewan yang berkembang biak dengan bertelur disebut?", "Ovipar", ("Vivipar", "Ovovivipar", "Vegetatif")),
    Fact("Sistem peredaran darah manusia bersifat?", "Tertutup", ("Terbuka", "Tunggal", "Sederhana")),
    Fact("Hormon insulin diproduksi oleh?", "Pankreas", ("Hati", "Ginjal", "Tiroid")),
    Fact("Jumlah kromosom manusia normal adalah?", "46", ("23", "44", "48")),
    Fact("Vitamin yang larut dalam lemak adalah?", "Vitamin A, D, E, K", ("Vitamin B, C", "Vitamin B saja", "Vitamin C saja")),
    Fact("Enzim pencernaan yang terdapat di mulut adalah?", "Amilase", ("Pepsin", "Tripsin", "Lipase")),
)


@template(Level.SMA, Subject.BIOLOGI, signature_prefix="bio-")
def biologi_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, BIOLOGI_FACTS, "bio")
