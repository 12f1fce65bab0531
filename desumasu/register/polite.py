"""Plain-to-polite predicate rewriting.

Only the predicate at the end of a clause is rewritten; everything before it
is copied through. Rules, in the order they are tried on the last word:

- です / ます: already polite, unchanged
- auxiliary だ: becomes です
- verb: continuative form + ます
- ある: after で (である) the pair becomes です, otherwise あります
- ない: after で ではありません, after a verb continuative + ません,
  otherwise ありません
- past た: decided by the word before it (see ``_past``)
- volitional う (しよう): the rest rendered for ウ-connection + う
- contracted negative ん (許さん): the rest rendered as negative + ん
- anything else: + です
"""

from dataclasses import dataclass

from ..errors import UnsupportedCopulaPairing
from ..inflection import convert
from ..models import Clause, ConjugationForm as F, ConjugationKind as K, Token, WordClass
from ..utils.logging import get_logger
from .cursor import TokenCursor

logger = get_logger(__name__)

POLITE_LEMMAS = ("です", "ます")

COPULA_TABLE = {
    ("です", F.BASIC): "です",
    ("です", F.NEGATIVE_U): "でしょ",
    ("ます", F.BASIC): "ます",
    ("ます", F.NEGATIVE): "ませ",
    ("ます", F.NEGATIVE_U): "ましょ",
}


def copula(lemma: str, form: F) -> str:
    """Look up the polite auxiliary spelled for the requested slot.

    Raises:
        UnsupportedCopulaPairing: If the table has no such entry.
    """
    try:
        return COPULA_TABLE[(lemma, form)]
    except KeyError:
        raise UnsupportedCopulaPairing(lemma, form) from None


def make_continuous(token: Token) -> str:
    """Turn a plain verb into the stem that precedes ます.

    Raises:
        UnsupportedConjugation: If the inflection engine has no rule.
    """
    kind, form = token.kind, token.form

    # Tokenizers tag some suru compounds oddly; the negative stem is the
    # spelling that works for them.
    if kind is K.SAHEN_SURU_CONNECTED:
        return convert(token.surface, kind, form, F.NEGATIVE)

    if kind is K.SAHEN_ZURU_CONNECTED:
        return token.lemma[:-len("ずる")] + "じ"

    # FIXME: the continuative of the single-row ru paradigm is unknown, so
    # the lemma passes through as is.
    if kind is K.ICHIDAN_RU:
        return token.lemma

    if kind in (K.SPECIAL_NAI, K.SPECIAL_TAI):
        return convert(token.surface, kind, form, F.CONTINUOUS_DE)

    return convert(token.surface, kind, form, F.CONTINUOUS)


@dataclass
class PoliteTransformer:
    """Rewrites the final predicate of a clause into desu/masu style."""

    def transform(self, clause: Clause, form: F = F.BASIC) -> str:
        """Render a clause in the polite register.

        Args:
            clause: Clause to rewrite.
            form: Slot the final polite auxiliary must fill.

        Returns:
            Polite text including trailing particles and separator.
        """
        result = self._convert(TokenCursor(clause.body), form) + clause.separator.surface
        logger.debug(f"{clause.text} -> {result}")
        return result

    def _convert(self, cursor: TokenCursor, form: F) -> str:
        spaces = cursor.take_spaces()
        ends = cursor.take_ends()
        return self._predicate(cursor, form) + ends + spaces

    def _predicate(self, cursor: TokenCursor, form: F) -> str:
        last = cursor.pop()
        if last is None:
            return ""

        if last.lemma in POLITE_LEMMAS:
            return cursor.surface() + last.surface

        if last.is_auxiliary("だ"):
            return cursor.surface() + copula("です", form)

        if last.word_class is WordClass.VERB:
            return cursor.surface() + make_continuous(last) + copula("ます", form)

        if last.is_auxiliary("ある"):
            return self._existential(cursor, form)

        if last.lemma == "ない" and last.word_class in (
            WordClass.AUXILIARY_VERB,
            WordClass.ADJECTIVE,
        ):
            return self._negative(cursor)

        if last.is_auxiliary("た"):
            return self._past(cursor)

        if last.lemma == "う":
            return self._convert(cursor.copy(), F.NEGATIVE_U) + "う"

        if last.lemma == "ん":
            return self._convert(cursor.copy(), F.NEGATIVE) + "ん"

        return cursor.surface() + last.surface + "です"

    def _existential(self, cursor: TokenCursor, form: F) -> str:
        prior = cursor.pop()
        if prior is None:
            return "あり" + copula("ます", form)
        if prior.is_auxiliary("だ"):
            return cursor.surface() + copula("です", form)
        return cursor.surface() + prior.surface + "あり" + copula("ます", form)

    def _negative(self, cursor: TokenCursor) -> str:
        prior = cursor.pop()
        if prior is None:
            return "ありません"
        if prior.is_auxiliary("で"):
            return cursor.surface() + "ではありません"
        if prior.word_class is WordClass.VERB:
            return cursor.surface() + make_continuous(prior) + "ません"
        # Adjectives and everything else take ありません after the surface
        return cursor.surface() + prior.surface + "ありません"

    def _past(self, cursor: TokenCursor) -> str:
        prior = cursor.pop()
        if prior is None:
            return "たです"
        if prior.lemma in POLITE_LEMMAS:
            return cursor.surface() + prior.surface + "た"
        if prior.word_class is WordClass.VERB:
            return cursor.surface() + make_continuous(prior) + "ました"
        if prior.is_auxiliary("だ"):
            return cursor.surface() + "でした"
        if prior.is_auxiliary("ある"):
            # である + た: the で is already in place
            return cursor.surface() + "した"
        if prior.lemma == "ない":
            cursor.push_back()
            return self._convert(cursor.copy(), F.BASIC) + "でした"
        return cursor.surface() + prior.surface + "たです"


def to_polite(clause: Clause) -> str:
    """Convenience function to render one clause politely."""
    return PoliteTransformer().transform(clause)
