"""Social studies (IPS) templates for SMP."""
from __future__ import annotations

from olympiad.core.models import Level, Subject
from olympiad.core.random_source import RandomSource
from olympiad.generation.templates.base import Fact, TemplateResult, fact_result, template

IPS_FACTS: tuple[Fact, ...] = (
    Fact("Apa ibu kota Indonesia?", "Jakarta", ("Surabaya", "Bandung", "Medan")),
    Fact("Pulau terbesar di Indonesia adalah?", "Kalimantan", ("Sumatera", "Jawa", "Sulawesi")),
    Fact("Sungai terpanjang di Indonesia adalah?", "Sungai Kapuas", ("Sungai Mahakam", "Sungai Musi", "Sungai Barito")),
    Fact("Gunung tertinggi di Indonesia adalah?", "Puncak Jaya", ("Gunung Semeru", "Gunung Rinjani", "Gunung Kerinci")),
    Fact("Danau terbesar di Indonesia adalah?", "Danau Toba", ("Danau Sentani", "Danau Maninjau", "Danau Singkarak")),
    Fact("Selat yang memisahkan Jawa dan Sumatera adalah?", "Selat Sunda", ("Selat Malaka", "Selat Bali", "Selat Madura")),
    Fact("Proklamator kemerdekaan Indonesia adalah Soekarno dan?", "Mohammad Hatta", ("Ahmad Yani", "Sudirman", "Tan Malaka")),
    Fact("Indonesia merdeka pada tanggal?", "17 Agustus 1945", ("1 Juni 1945", "10 November 1945", "28 Oktober 1928")),
    Fact("Mata uang resmi Indonesia adalah?", "Rupiah", ("Ringgit", "Baht", "Dollar")),
    Fact("Organisasi pergerakan pertama di Indonesia adalah?", "Budi Utomo", ("Sarekat Islam", "Muhammadiyah", "PNI")),
)


@template(Level.SMP, Subject.IPS, signature_prefix="ips-")
def ips_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, IPS_FACTS, "ips", explanation_label="Jawaban yang benar", keep_punctuation=True)
