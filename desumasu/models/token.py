"""Token and clause data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class WordClass(Enum):
    """Top-level part of speech of a token."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    AUXILIARY_VERB = "auxiliary_verb"
    POSTPOSITIONAL = "postpositional"
    SYMBOL = "symbol"
    ADVERB = "adverb"
    ADNOMINAL = "adnominal"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    PREFIX = "prefix"
    FILLER = "filler"
    OTHER = "other"


class Postpositional(Enum):
    """Sub-category of a postpositional particle."""
    CASE = "case"
    BINDING = "binding"
    ADVERBIAL = "adverbial"
    CONJUNCTION = "conjunction"
    END = "end"
    SUPPLEMENTARY_PARALLEL_END = "supplementary_parallel_end"
    PARALLEL = "parallel"
    ADNOMINALIZER = "adnominalizer"
    ADVERBIALIZER = "adverbializer"
    SPECIAL = "special"
    OTHER = "other"


class Symbol(Enum):
    """Sub-category of a symbol token."""
    PERIOD = "period"
    COMMA = "comma"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    SPACE = "space"
    ALPHABET = "alphabet"
    GENERAL = "general"


class ConjugationKind(Enum):
    """Inflection paradigm of a word."""
    GODAN_KA = "godan_ka"
    GODAN_KA_IKU = "godan_ka_iku"
    GODAN_GA = "godan_ga"
    GODAN_SA = "godan_sa"
    GODAN_TA = "godan_ta"
    GODAN_NA = "godan_na"
    GODAN_BA = "godan_ba"
    GODAN_MA = "godan_ma"
    GODAN_RA = "godan_ra"
    GODAN_RA_ARU = "godan_ra_aru"
    GODAN_RA_SPECIAL = "godan_ra_special"
    GODAN_WA = "godan_wa"
    ICHIDAN = "ichidan"
    ICHIDAN_RU = "ichidan_ru"
    KAHEN = "kahen"
    SAHEN_SURU = "sahen_suru"
    SAHEN_SURU_CONNECTED = "sahen_suru_connected"
    SAHEN_ZURU_CONNECTED = "sahen_zuru_connected"
    ADJECTIVE = "adjective"
    SPECIAL_DA = "special_da"
    SPECIAL_DESU = "special_desu"
    SPECIAL_MASU = "special_masu"
    SPECIAL_TA = "special_ta"
    SPECIAL_NAI = "special_nai"
    SPECIAL_TAI = "special_tai"
    SPECIAL_NU = "special_nu"
    INVARIANT = "invariant"
    NONE = "none"


class ConjugationForm(Enum):
    """Grammatical form (slot) a word is inflected into."""
    BASIC = "basic"
    NEGATIVE = "negative"
    NEGATIVE_U = "negative_u"
    NEGATIVE_NU = "negative_nu"
    CONTINUOUS = "continuous"
    CONTINUOUS_TA = "continuous_ta"
    CONTINUOUS_TE = "continuous_te"
    CONTINUOUS_DE = "continuous_de"
    CONDITIONAL = "conditional"
    IMPERATIVE = "imperative"
    VOLITIONAL = "volitional"
    STEM = "stem"
    NONE = "none"


@dataclass(frozen=True)
class Conjugation:
    """Paradigm and current form of an inflecting word."""
    kind: ConjugationKind = ConjugationKind.NONE
    form: ConjugationForm = ConjugationForm.NONE


NO_CONJUGATION = Conjugation()

Subclass = Union[Postpositional, Symbol, str, None]


@dataclass(frozen=True)
class Token:
    """A classified word produced by the tokenizer.

    Attributes:
        surface: Text as it appears in the input.
        lemma: Dictionary form.
        word_class: Top-level part of speech.
        subclass: Postpositional or Symbol sub-category, or free-text detail.
        conjugation: Inflection paradigm and current form.
        reading: Katakana reading.
        pronunciation: Katakana pronunciation.
        start: Character offset in the source text, -1 for synthetic tokens.
    """
    surface: str
    lemma: str
    word_class: WordClass
    subclass: Subclass = None
    conjugation: Conjugation = NO_CONJUGATION
    reading: str = ""
    pronunciation: str = ""
    start: int = -1

    @property
    def kind(self) -> ConjugationKind:
        return self.conjugation.kind

    @property
    def form(self) -> ConjugationForm:
        return self.conjugation.form

    @property
    def is_synthetic(self) -> bool:
        return self.start < 0

    def is_a(self, word_class: WordClass, subclass: Subclass = None) -> bool:
        """Check word class, and sub-category when one is given."""
        if self.word_class is not word_class:
            return False
        return subclass is None or self.subclass == subclass

    def is_auxiliary(self, lemma: str) -> bool:
        """Check for an auxiliary verb with the given dictionary form."""
        return self.word_class is WordClass.AUXILIARY_VERB and self.lemma == lemma

    @property
    def is_sentence_final_particle(self) -> bool:
        return self.word_class is WordClass.POSTPOSITIONAL and self.subclass in (
            Postpositional.END,
            Postpositional.SUPPLEMENTARY_PARALLEL_END,
        )


def create_period(surface: str = "。") -> Token:
    """Create a synthetic period token that closes an unterminated clause."""
    return Token(
        surface=surface,
        lemma=surface,
        word_class=WordClass.SYMBOL,
        subclass=Symbol.PERIOD,
        reading=surface,
        pronunciation=surface,
        start=-1,
    )


@dataclass(frozen=True)
class Clause:
    """Body tokens closed by exactly one separator token."""
    body: Tuple[Token, ...]
    separator: Token

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self.body + (self.separator,)

    @property
    def text(self) -> str:
        return "".join(t.surface for t in self.tokens)

    @property
    def start(self) -> Optional[int]:
        for token in self.tokens:
            if not token.is_synthetic:
                return token.start
        return None
