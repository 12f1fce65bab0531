"""Table-driven inflection of Japanese verbs, adjectives and auxiliaries.

Each paradigm maps a form to the ending that replaces the dictionary-form
ending. Converting a surface from one form to another strips the source
ending to recover the stem and appends the target ending:

    書か (GODAN_KA, NEGATIVE) -> 書 + き -> 書き (CONTINUOUS)

Some forms have several spellings (kana and kanji for 来る, た and だ for
the past auxiliary). Variants are matched index-to-index, so 来 stays
来 and 読ん+だ keeps its voiced だ.
"""

from typing import Dict, Tuple

from ..errors import UnsupportedConjugation
from ..models import ConjugationForm as F
from ..models import ConjugationKind as K

Endings = Tuple[str, ...]
Row = Dict[F, Endings]


def _godan(u: str, a: str, o: str, i: str, ta: str, e: str) -> Row:
    """Build a godan row from its vowel-column endings."""
    return {
        F.BASIC: (u,),
        F.NEGATIVE: (a,),
        F.NEGATIVE_U: (o,),
        F.CONTINUOUS: (i,),
        F.CONTINUOUS_TA: (ta,),
        F.CONTINUOUS_TE: (ta,),
        F.CONDITIONAL: (e,),
        F.IMPERATIVE: (e,),
        F.VOLITIONAL: (o + "う",),
    }


_ICHIDAN: Row = {
    F.BASIC: ("る",),
    F.NEGATIVE: ("",),
    F.NEGATIVE_U: ("よ",),
    F.CONTINUOUS: ("",),
    F.CONTINUOUS_TA: ("",),
    F.CONTINUOUS_TE: ("",),
    F.CONDITIONAL: ("れ",),
    F.IMPERATIVE: ("ろ", "よ"),
    F.VOLITIONAL: ("よう",),
}

_SURU: Row = {
    F.BASIC: ("する",),
    F.NEGATIVE: ("し", "さ", "せ"),
    F.NEGATIVE_U: ("しよ",),
    F.CONTINUOUS: ("し",),
    F.CONTINUOUS_TA: ("し",),
    F.CONTINUOUS_TE: ("し",),
    F.CONDITIONAL: ("すれ",),
    F.IMPERATIVE: ("しろ", "せよ"),
    F.VOLITIONAL: ("しよう",),
}

_GODAN_RA = _godan("る", "ら", "ろ", "り", "っ", "れ")

CONJUGATION_TABLE: Dict[K, Row] = {
    K.GODAN_KA: _godan("く", "か", "こ", "き", "い", "け"),
    K.GODAN_KA_IKU: _godan("く", "か", "こ", "き", "っ", "け"),
    K.GODAN_GA: _godan("ぐ", "が", "ご", "ぎ", "い", "げ"),
    K.GODAN_SA: _godan("す", "さ", "そ", "し", "し", "せ"),
    K.GODAN_TA: _godan("つ", "た", "と", "ち", "っ", "て"),
    K.GODAN_NA: _godan("ぬ", "な", "の", "に", "ん", "ね"),
    K.GODAN_BA: _godan("ぶ", "ば", "ぼ", "び", "ん", "べ"),
    K.GODAN_MA: _godan("む", "ま", "も", "み", "ん", "め"),
    K.GODAN_RA: _GODAN_RA,
    K.GODAN_RA_ARU: _GODAN_RA,
    K.GODAN_RA_SPECIAL: {
        **_GODAN_RA,
        F.CONTINUOUS: ("い", "り"),
        F.IMPERATIVE: ("い",),
    },
    K.GODAN_WA: _godan("う", "わ", "お", "い", "っ", "え"),
    K.ICHIDAN: _ICHIDAN,
    K.ICHIDAN_RU: _ICHIDAN,
    K.KAHEN: {
        F.BASIC: ("くる", "来る"),
        F.NEGATIVE: ("こ", "来"),
        F.NEGATIVE_U: ("こよ", "来よ"),
        F.CONTINUOUS: ("き", "来"),
        F.CONTINUOUS_TA: ("き", "来"),
        F.CONTINUOUS_TE: ("き", "来"),
        F.CONDITIONAL: ("くれ", "来れ"),
        F.IMPERATIVE: ("こい", "来い"),
        F.VOLITIONAL: ("こよう", "来よう"),
    },
    K.SAHEN_SURU: _SURU,
    K.SAHEN_SURU_CONNECTED: _SURU,
    K.SAHEN_ZURU_CONNECTED: {
        F.BASIC: ("ずる",),
        F.NEGATIVE: ("じ", "ぜ"),
        F.NEGATIVE_U: ("じよ",),
        F.CONTINUOUS: ("じ",),
        F.CONTINUOUS_TA: ("じ",),
        F.CONTINUOUS_TE: ("じ",),
        F.CONDITIONAL: ("ずれ",),
        F.IMPERATIVE: ("じろ", "ぜよ"),
    },
    K.ADJECTIVE: {
        F.BASIC: ("い",),
        F.NEGATIVE_NU: ("から",),
        F.NEGATIVE_U: ("かろ",),
        F.CONTINUOUS: ("く",),
        F.CONTINUOUS_TA: ("かっ",),
        F.CONTINUOUS_TE: ("く",),
        F.CONDITIONAL: ("けれ",),
        F.STEM: ("",),
    },
    K.SPECIAL_DA: {
        F.BASIC: ("だ", "な"),
        F.NEGATIVE_U: ("だろ",),
        F.CONTINUOUS: ("で",),
        F.CONTINUOUS_TA: ("だっ",),
        F.CONTINUOUS_DE: ("で",),
        F.CONDITIONAL: ("なら",),
    },
    K.SPECIAL_DESU: {
        F.BASIC: ("です",),
        F.NEGATIVE_U: ("でしょ",),
        F.CONTINUOUS: ("でし",),
        F.CONTINUOUS_TA: ("でし",),
    },
    K.SPECIAL_MASU: {
        F.BASIC: ("ます",),
        F.NEGATIVE: ("ませ",),
        F.NEGATIVE_U: ("ましょ",),
        F.CONTINUOUS: ("まし",),
        F.CONTINUOUS_TA: ("まし",),
        F.CONDITIONAL: ("ますれ",),
        F.IMPERATIVE: ("ませ", "まし"),
    },
    K.SPECIAL_TA: {
        F.BASIC: ("た", "だ"),
        F.NEGATIVE_U: ("たろ", "だろ"),
        F.CONDITIONAL: ("たら", "だら"),
    },
    K.SPECIAL_NAI: {
        F.BASIC: ("ない",),
        F.NEGATIVE_U: ("なかろ",),
        F.CONTINUOUS: ("なく",),
        F.CONTINUOUS_TA: ("なかっ",),
        F.CONTINUOUS_TE: ("なく",),
        F.CONTINUOUS_DE: ("ないで",),
        F.CONDITIONAL: ("なけれ",),
        F.STEM: ("な",),
    },
    K.SPECIAL_TAI: {
        F.BASIC: ("たい",),
        F.NEGATIVE_U: ("たかろ",),
        F.CONTINUOUS: ("たく",),
        F.CONTINUOUS_TA: ("たかっ",),
        F.CONTINUOUS_TE: ("たく",),
        F.CONDITIONAL: ("たけれ",),
        F.STEM: ("た",),
    },
    K.SPECIAL_NU: {
        F.BASIC: ("ぬ", "ん"),
        F.CONTINUOUS: ("ず",),
        F.CONDITIONAL: ("ね",),
    },
}


def supports(kind: K, form: F) -> bool:
    """Check whether a paradigm defines the given form."""
    return form in CONJUGATION_TABLE.get(kind, {})


def convert(surface: str, kind: K, from_form: F, to_form: F) -> str:
    """Inflect a surface from one form of its paradigm into another.

    Args:
        surface: Word as it currently appears.
        kind: Inflection paradigm of the word.
        from_form: Form the surface is currently in.
        to_form: Form to produce.

    Returns:
        The inflected surface.

    Raises:
        UnsupportedConjugation: If the paradigm lacks either form or the
            surface does not carry the expected ending.
    """
    if from_form is to_form:
        return surface

    row = CONJUGATION_TABLE.get(kind)
    if row is None or from_form not in row or to_form not in row:
        raise UnsupportedConjugation(surface, kind, from_form, to_form)

    targets = row[to_form]
    for index, ending in enumerate(row[from_form]):
        if surface.endswith(ending):
            stem = surface[:len(surface) - len(ending)]
            return stem + targets[index if index < len(targets) else 0]

    raise UnsupportedConjugation(surface, kind, from_form, to_form)
