"""
Earth and space templates for SMA: Astronomi, Kebumian, Geografi.

All three are factual banks with hand-picked distractors.
"""
from __future__ import annotations

from olympiad.core.models import Level, Subject
from olympiad.core.random_source import RandomSource
from olympiad.generation.templates.base import Fact, TemplateResult, fact_result, template

ASTRONOMI_FACTS: tuple[Fact, ...] = (
    Fact("Planet terbesar di tata surya adalah?", "Jupiter", ("Saturnus", "Uranus", "Neptunus")),
    Fact(
        "Bintang terdekat dari Bumi selain Matahari adalah?",
        "Proxima Centauri",
        ("Sirius", "Alpha Centauri A", "Betelgeuse"),
    ),
    Fact("Galaksi tempat tinggal kita disebut?", "Bima Sakti", ("Andromeda", "Triangulum", "Sombrero")),
    Fact("Planet yang memiliki cincin paling terlihat adalah?", "Saturnus", ("Jupiter", "Uranus", "Neptunus")),
    Fact(
        "Fenomena gerhana matahari terjadi ketika?",
        "Bulan berada di antara Bumi dan Matahari",
        (
            "Bumi berada di antara Bulan dan Matahari",
            "Matahari berada di antara Bumi dan Bulan",
            "Planet lain menghalangi",
        ),
    ),
    Fact(
        "Satuan jarak yang digunakan untuk mengukur jarak bintang adalah?",
        "Tahun cahaya",
        ("Kilometer", "Mil", "Meter"),
    ),
)

KEBUMIAN_FACTS: tuple[Fact, ...] = (
    Fact("Lapisan Bumi yang paling tebal adalah?", "Mantel", ("Kerak", "Inti luar", "Inti dalam")),
    Fact(
        "Skala yang digunakan untuk mengukur kekuatan gempa adalah?",
        "Skala Richter",
        ("Skala Beaufort", "Skala Mohs", "Skala Celsius"),
    ),
    Fact("Batuan yang terbentuk dari magma yang membeku disebut batuan?", "Beku", ("Sedimen", "Metamorf", "Mineral")),
    Fact("Lapisan atmosfer tempat cuaca terjadi adalah?", "Troposfer", ("Stratosfer", "Mesosfer", "Termosfer")),
    Fact("Apa yang menyebabkan terjadinya tsunami?", "Gempa bawah laut", ("Angin kencang", "Hujan lebat", "Erupsi gunung")),
    Fact("Mineral dengan kekerasan tertinggi pada skala Mohs adalah?", "Berlian", ("Kuarsa", "Topaz", "Korundum")),
)

GEOGRAFI_FACTS: tuple[Fact, ...] = (
    Fact(
        "Garis khayal yang membagi Bumi menjadi belahan utara dan selatan adalah?",
        "Garis Khatulistiwa",
        ("Garis Bujur", "Garis Wallace", "Garis Weber"),
    ),
    Fact("Benua terluas di dunia adalah?", "Asia", ("Afrika", "Amerika", "Eropa")),
    Fact(
        "Samudra terluas di dunia adalah?",
        "Samudra Pasifik",
        ("Samudra Atlantik", "Samudra Hindia", "Samudra Arktik"),
    ),
    Fact("Negara dengan penduduk terbanyak di dunia adalah?", "India", ("China", "Amerika Serikat", "Indonesia")),
    Fact("Iklim Indonesia termasuk iklim?", "Tropis", ("Subtropis", "Sedang", "Kutub")),
    Fact("Angin muson barat membawa?", "Musim hujan", ("Musim kemarau", "Musim semi", "Musim gugur")),
)


@template(Level.SMA, Subject.ASTRONOMI, signature_prefix="astro-")
def astronomi_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, ASTRONOMI_FACTS, "astro", max_len=10)


@template(Level.SMA, Subject.KEBUMIAN, signature_prefix="kbm-")
def kebumian_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, KEBUMIAN_FACTS, "kbm", max_len=10)


@template(Level.SMA, Subject.GEOGRAFI, signature_prefix="geo-")
def geografi_fact(rng: RandomSource) -> TemplateResult:
    return fact_result(rng, GEOGRAFI_FACTS, "geo", max_len=10)
