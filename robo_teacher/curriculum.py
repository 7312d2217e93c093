"""
カリキュラム表 + システムプロンプト生成
========================================
SD（小学校）3〜6年生向けの科目・学年別トピック表。
起動時に一度だけ構築し、実行中に書き換えない。
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT_KEY = "pkn"
DEFAULT_GRADE = "3"

SYSTEM_PROMPT_TEMPLATE = (
    "Anda adalah ROBO Teacher, asisten AI untuk siswa SD Kelas {grade}. "
    "Mata Pelajaran: {name}. Topik: {topic}. Jawab dengan ramah dan singkat."
)


@dataclass(frozen=True)
class CurriculumEntry:
    """科目の表示名と、学年 → トピックの対応"""
    name: str
    topics: Mapping[str, str]


def _entry(name: str, g3: str, g4: str, g5: str, g6: str) -> CurriculumEntry:
    return CurriculumEntry(
        name=name,
        topics=MappingProxyType({"3": g3, "4": g4, "5": g5, "6": g6}),
    )


CURRICULUM: Mapping[str, CurriculumEntry] = MappingProxyType({
    "pkn": _entry("PKn", "Pancasila", "NKRI", "HAM", "Globalisasi"),
    "bindonesia": _entry("Bahasa Indonesia", "Membaca", "Puisi", "Laporan", "Resensi"),
    "matematika": _entry("Matematika", "Perkalian", "Pecahan", "Bilangan Bulat", "Aritmatika"),
    "ipas": _entry("IPAS", "Makhluk Hidup", "Energi", "Tata Surya", "Bioteknologi"),
    "sbdp": _entry("SBdP", "Menggambar", "Musik", "Kerajinan", "Desain"),
    "pjok": _entry("PJOK", "Gerak Dasar", "Permainan", "Atletik", "Kesehatan"),
    "binggris": _entry("Bahasa Inggris", "Greetings", "Daily Act", "Hobbies", "Vacation"),
})


@dataclass(frozen=True)
class SubjectContext:
    """解決済みの科目・学年・トピック"""
    key: str
    grade: str
    name: str
    topic: str


def parse_subject(subject: str | None) -> tuple[str, str | None]:
    """"<key>-<grade>" を (key, grade) に分割する。未指定なら ("pkn", "3")。"""
    if not subject:
        return DEFAULT_SUBJECT_KEY, DEFAULT_GRADE
    parts = subject.split("-")
    grade = parts[1].strip() if len(parts) > 1 else None
    return parts[0].strip(), grade


def resolve_subject(subject: str | None) -> SubjectContext:
    """
    subject 文字列からカリキュラム情報を引く。

    - 未知の科目キー → pkn にフォールバック（学年は指定値のまま）
    - 3〜6 以外の学年 → 3 年生にフォールバック
    """
    key, grade = parse_subject(subject)

    entry = CURRICULUM.get(key)
    if entry is None:
        logger.info("Unknown subject key %r, falling back to %s", key, DEFAULT_SUBJECT_KEY)
        key = DEFAULT_SUBJECT_KEY
        entry = CURRICULUM[DEFAULT_SUBJECT_KEY]

    if grade not in entry.topics:
        logger.warning("Unsupported grade %r for subject %s, using grade %s", grade, key, DEFAULT_GRADE)
        grade = DEFAULT_GRADE

    return SubjectContext(key=key, grade=grade, name=entry.name, topic=entry.topics[grade])


def build_system_prompt(ctx: SubjectContext) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(grade=ctx.grade, name=ctx.name, topic=ctx.topic)
