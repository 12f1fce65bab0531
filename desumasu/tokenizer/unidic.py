"""Mapping of UniDic labels (as emitted by Sudachi through spaCy) to tokens.

spaCy's Japanese tokenizer exposes the part of speech as ``token.tag_``
(``"助詞-終助詞"``) and the inflection as ``morph["Inflection"]``
(``"五段-ラ行;連用形-促音便"``). The rule engine expects a coarser,
IPADIC-like granularity, so a few constructions are normalized after mapping.
"""

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from ..models import (
    Conjugation,
    ConjugationForm as F,
    ConjugationKind as K,
    NO_CONJUGATION,
    Postpositional,
    Symbol,
    Token,
    WordClass,
)
from ..models.token import Subclass

WORD_CLASSES = {
    "名詞": WordClass.NOUN,
    "代名詞": WordClass.NOUN,
    "形状詞": WordClass.NOUN,
    "動詞": WordClass.VERB,
    "形容詞": WordClass.ADJECTIVE,
    "助動詞": WordClass.AUXILIARY_VERB,
    "助詞": WordClass.POSTPOSITIONAL,
    "補助記号": WordClass.SYMBOL,
    "記号": WordClass.SYMBOL,
    "空白": WordClass.SYMBOL,
    "副詞": WordClass.ADVERB,
    "連体詞": WordClass.ADNOMINAL,
    "接続詞": WordClass.CONJUNCTION,
    "感動詞": WordClass.INTERJECTION,
    "接頭辞": WordClass.PREFIX,
}

SUFFIX_CLASSES = {
    "名詞的": WordClass.NOUN,
    "形状詞的": WordClass.NOUN,
    "動詞的": WordClass.VERB,
    "形容詞的": WordClass.ADJECTIVE,
}

POSTPOSITIONALS = {
    "格助詞": Postpositional.CASE,
    "係助詞": Postpositional.BINDING,
    "副助詞": Postpositional.ADVERBIAL,
    "接続助詞": Postpositional.CONJUNCTION,
    "終助詞": Postpositional.END,
    "準体助詞": Postpositional.ADNOMINALIZER,
}

SYMBOLS = {
    "句点": Symbol.PERIOD,
    "読点": Symbol.COMMA,
    "括弧開": Symbol.OPEN_PAREN,
    "括弧閉": Symbol.CLOSE_PAREN,
}

GODAN_ROWS = {
    "カ行": K.GODAN_KA,
    "ガ行": K.GODAN_GA,
    "サ行": K.GODAN_SA,
    "タ行": K.GODAN_TA,
    "ナ行": K.GODAN_NA,
    "バ行": K.GODAN_BA,
    "マ行": K.GODAN_MA,
    "ラ行": K.GODAN_RA,
    "ワア行": K.GODAN_WA,
}

AUXILIARY_TYPES = {
    "助動詞-ダ": K.SPECIAL_DA,
    "助動詞-デス": K.SPECIAL_DESU,
    "助動詞-マス": K.SPECIAL_MASU,
    "助動詞-タ": K.SPECIAL_TA,
    "助動詞-ナイ": K.SPECIAL_NAI,
    "助動詞-タイ": K.SPECIAL_TAI,
    "助動詞-ヌ": K.SPECIAL_NU,
    "助動詞-レル": K.ICHIDAN,
    "助動詞-ラレル": K.ICHIDAN,
    "助動詞-セル": K.ICHIDAN,
    "助動詞-サセル": K.ICHIDAN,
    "助動詞-ラシイ": K.ADJECTIVE,
    "無変化型": K.INVARIANT,
}

FORMS = {
    "終止形-一般": F.BASIC,
    "終止形-撥音便": F.BASIC,
    "連体形-一般": F.BASIC,
    "未然形-一般": F.NEGATIVE,
    "未然形-サ": F.NEGATIVE,
    "未然形-セ": F.NEGATIVE,
    "未然形-撥音便": F.NEGATIVE,
    "意志推量形": F.VOLITIONAL,
    "連用形-一般": F.CONTINUOUS,
    "連用形-ニ": F.CONTINUOUS,
    "連用形-促音便": F.CONTINUOUS_TA,
    "連用形-イ音便": F.CONTINUOUS_TA,
    "連用形-撥音便": F.CONTINUOUS_TA,
    "仮定形-一般": F.CONDITIONAL,
    "命令形": F.IMPERATIVE,
    "語幹-一般": F.STEM,
}

# Passive and causative auxiliaries inflect like ichidan verbs
VOICE_LEMMAS = {"れる", "られる", "せる", "させる"}

IKU_LEMMAS = {"行く", "いく", "逝く"}
RA_SPECIAL_LEMMAS = {"なさる", "くださる", "下さる", "いらっしゃる", "おっしゃる", "仰る", "ござる"}


def parse_tag(tag: str) -> Tuple[WordClass, Subclass]:
    """Map a UniDic part-of-speech tag to a word class and sub-category."""
    parts = [p for p in (tag or "").split("-") if p]
    if not parts:
        return WordClass.OTHER, None

    head, rest = parts[0], parts[1:]
    first = rest[0] if rest else ""
    detail = "-".join(rest) or None

    if head == "接尾辞":
        return SUFFIX_CLASSES.get(first, WordClass.NOUN), detail
    if head == "感動詞" and first == "フィラー":
        return WordClass.FILLER, None
    if head == "空白":
        return WordClass.SYMBOL, Symbol.SPACE

    word_class = WORD_CLASSES.get(head, WordClass.OTHER)
    if word_class is WordClass.POSTPOSITIONAL:
        return word_class, POSTPOSITIONALS.get(first, Postpositional.OTHER)
    if word_class is WordClass.SYMBOL:
        return word_class, SYMBOLS.get(first, Symbol.GENERAL)
    return word_class, detail


def parse_kind(label: str, lemma: str) -> K:
    """Map a UniDic conjugation type to an inflection paradigm."""
    if not label:
        return K.NONE

    if label.startswith("五段-"):
        kind = GODAN_ROWS.get(label[len("五段-"):], K.NONE)
        if kind is K.GODAN_KA and lemma in IKU_LEMMAS:
            return K.GODAN_KA_IKU
        if kind is K.GODAN_RA and lemma == "ある":
            return K.GODAN_RA_ARU
        if kind is K.GODAN_RA and lemma in RA_SPECIAL_LEMMAS:
            return K.GODAN_RA_SPECIAL
        return kind

    if label.startswith(("上一段-", "下一段-")):
        return K.ICHIDAN
    if label.startswith("文語上一段"):
        return K.ICHIDAN_RU
    if label == "カ行変格":
        return K.KAHEN
    if label in ("サ行変格", "文語サ行変格"):
        if lemma.endswith("ずる"):
            return K.SAHEN_ZURU_CONNECTED
        if lemma != "する" and lemma.endswith("する"):
            return K.SAHEN_SURU_CONNECTED
        return K.SAHEN_SURU
    if label == "形容詞":
        return K.ADJECTIVE

    return AUXILIARY_TYPES.get(label, K.NONE)


def parse_inflection(inflection: Optional[str], lemma: str) -> Conjugation:
    """Map ``"<type>;<form>"`` to a Conjugation."""
    if not inflection:
        return NO_CONJUGATION
    label, _, form = inflection.partition(";")
    return Conjugation(kind=parse_kind(label, lemma), form=FORMS.get(form, F.NONE))


def _split_volitional(token: Token) -> List[Token]:
    # しよう -> しよ + う, matching the ウ-connection stem the rules expect
    stem = replace(
        token,
        surface=token.surface[:-1],
        conjugation=Conjugation(token.kind, F.NEGATIVE_U),
        reading=token.reading[:-1] if token.reading.endswith("ウ") else token.reading,
        pronunciation=token.pronunciation[:-1] if token.pronunciation.endswith("ウ") else token.pronunciation,
    )
    suffix = Token(
        surface="う",
        lemma="う",
        word_class=WordClass.AUXILIARY_VERB,
        conjugation=Conjugation(K.INVARIANT, F.BASIC),
        reading="ウ",
        pronunciation="ウ",
        start=token.start + len(token.surface) - 1,
    )
    return [stem, suffix]


def normalize_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Reshape UniDic tokens into the granularity the rules work on.

    - volitional predicates are split into stem and auxiliary う
    - the contracted negative ん takes ん as its lemma
    - ある right after copula で becomes an auxiliary (である)
    - passive and causative auxiliaries (される, 書かせる) become ichidan
      verbs, so the verb rules inflect them
    """
    result: List[Token] = []
    for token in tokens:
        if token.is_a(WordClass.AUXILIARY_VERB) and token.lemma in VOICE_LEMMAS:
            token = replace(
                token,
                word_class=WordClass.VERB,
                conjugation=Conjugation(K.ICHIDAN, token.form),
            )

        if token.form is F.VOLITIONAL and len(token.surface) > 1 and token.surface.endswith("う"):
            result.extend(_split_volitional(token))
            continue

        if token.kind is K.SPECIAL_NU and token.surface == "ん":
            token = replace(token, lemma="ん")

        previous = result[-1] if result else None
        if (
            token.word_class is WordClass.VERB
            and token.lemma == "ある"
            and previous is not None
            and previous.is_auxiliary("だ")
            and previous.surface == "で"
        ):
            token = replace(
                token,
                word_class=WordClass.AUXILIARY_VERB,
                conjugation=Conjugation(K.GODAN_RA_ARU, token.form),
            )

        result.append(token)
    return result
