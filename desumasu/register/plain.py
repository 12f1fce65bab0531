"""Polite-to-plain predicate rewriting.

This is the approximate inverse of ``polite``. The final predicate is
rendered into one of a list of acceptable forms (slots); the first slot the
inflection engine can produce wins. Rules on the last word:

- auxiliary だ / ある: already plain, inflected to the slot
- です: dropped after an adjective or past た, otherwise becomes だ
  unless sentence-final particles follow
- ます: the verb before it is inflected to the slot
- う: でしょう becomes だろう, ましょう becomes the verb's volitional
- ん: ません becomes ない (ありません becomes ない)
- past た: でした becomes だった, ました becomes the verb's past
- anything else: inflected to the slot, or kept as is when impossible
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..errors import UnsupportedConjugation
from ..inflection import convert, supports
from ..models import Clause, ConjugationForm as F, ConjugationKind as K, Token, WordClass
from ..utils.logging import get_logger
from .cursor import TokenCursor

logger = get_logger(__name__)

Slots = Tuple[F, ...]

BASIC_SLOTS: Slots = (F.BASIC,)
PAST_SLOTS: Slots = (F.CONTINUOUS_TA, F.CONTINUOUS)
VOLITIONAL_SLOTS: Slots = (F.NEGATIVE_U, F.NEGATIVE)
NEGATIVE_SLOTS: Slots = (F.NEGATIVE,)

AUXILIARY_KINDS = {
    "だ": K.SPECIAL_DA,
    "た": K.SPECIAL_TA,
    "ある": K.GODAN_RA_ARU,
    "です": K.SPECIAL_DESU,
    "ます": K.SPECIAL_MASU,
    "ない": K.SPECIAL_NAI,
}

# Past た is voiced to だ after these stems (読んだ, 泳いだ)
VOICED_PAST_KINDS = (K.GODAN_GA, K.GODAN_NA, K.GODAN_BA, K.GODAN_MA)


def inflect_first(surface: str, kind: K, form: F, slots: Sequence[F]) -> str:
    """Inflect into the first slot the paradigm supports.

    Slots the paradigm does not define are skipped. Falls back to the
    unchanged surface when no slot works.
    """
    for slot in slots:
        if not supports(kind, slot):
            continue
        try:
            return convert(surface, kind, form, slot)
        except UnsupportedConjugation:
            continue
    logger.debug(f"No conjugation of {surface!r} ({kind.value}) into {[s.value for s in slots]}")
    return surface


def inflect_token(token: Token, slots: Sequence[F]) -> str:
    return inflect_first(token.surface, token.kind, token.form, slots)


def auxiliary(lemma: str, slots: Sequence[F]) -> str:
    """Spell a plain auxiliary in the first supported slot."""
    try:
        kind = AUXILIARY_KINDS[lemma]
    except KeyError:
        raise ValueError(f"Unsupported auxiliary: {lemma}") from None
    return inflect_first(lemma, kind, F.BASIC, slots)


def past_auxiliary(stem: Token, slots: Sequence[F]) -> str:
    """Spell past た (or だ) to follow the given verb stem.

    Deliberately not a fixed た: the auxiliary is voiced to だ after stems
    of the ga, na, ba and ma rows (泳いだ, 死んだ, 遊んだ, 読んだ), where a
    fixed た would produce 読んた.
    """
    base = "だ" if stem.kind in VOICED_PAST_KINDS else "た"
    return inflect_first(base, K.SPECIAL_TA, F.BASIC, slots)


@dataclass
class PlainTransformer:
    """Rewrites the final predicate of a clause into plain style."""

    def transform(self, clause: Clause, slots: Sequence[F] = BASIC_SLOTS) -> str:
        """Render a clause in the plain register.

        Args:
            clause: Clause to rewrite.
            slots: Acceptable forms for the final predicate, in preference
                order.

        Returns:
            Plain text including trailing particles and separator.
        """
        result = self._convert(TokenCursor(clause.body), tuple(slots)) + clause.separator.surface
        logger.debug(f"{clause.text} -> {result}")
        return result

    def _convert(self, cursor: TokenCursor, slots: Slots) -> str:
        spaces = cursor.take_spaces()
        ends = cursor.take_ends()
        return self._predicate(cursor, slots, bool(ends)) + ends + spaces

    def _predicate(self, cursor: TokenCursor, slots: Slots, has_ends: bool) -> str:
        last = cursor.pop()
        if last is None:
            return ""

        if last.is_auxiliary("だ"):
            return cursor.surface() + auxiliary("だ", slots)

        if last.is_auxiliary("ある"):
            return cursor.surface() + auxiliary("ある", slots)

        if last.is_auxiliary("です"):
            return self._copula(cursor, slots, has_ends)

        if last.is_auxiliary("ます"):
            prior = cursor.pop()
            if prior is None:
                return ""
            if prior.word_class is WordClass.VERB:
                return cursor.surface() + inflect_token(prior, slots)
            return cursor.surface() + prior.surface

        if last.is_auxiliary("う"):
            return self._volitional(cursor)

        if last.is_auxiliary("ん"):
            return self._negative(cursor, slots)

        if last.is_auxiliary("た"):
            return self._past(cursor, slots)

        return cursor.surface() + inflect_token(last, slots)

    def _copula(self, cursor: TokenCursor, slots: Slots, has_ends: bool) -> str:
        prior = cursor.pop()
        if prior is not None and prior.word_class is WordClass.ADJECTIVE:
            return cursor.surface() + prior.surface
        if prior is not None and prior.is_auxiliary("た"):
            return cursor.surface() + auxiliary("た", slots)

        # 天気ですか -> 天気か, not 天気だか
        copula = "" if has_ends else auxiliary("だ", slots)
        if prior is None:
            return copula
        return cursor.surface() + prior.surface + copula

    def _volitional(self, cursor: TokenCursor) -> str:
        prior = cursor.pop()
        if prior is None:
            return "う"
        if prior.is_auxiliary("です"):
            return cursor.surface() + "だろう"
        if prior.is_auxiliary("ます"):
            verb = cursor.pop()
            if verb is None:
                return "う"
            return cursor.surface() + inflect_token(verb, VOLITIONAL_SLOTS) + "う"
        return cursor.surface() + prior.surface + "う"

    def _negative(self, cursor: TokenCursor, slots: Slots) -> str:
        prior = cursor.pop()
        if prior is None:
            return auxiliary("ない", slots)
        if prior.is_auxiliary("ます"):
            verb = cursor.pop()
            if verb is None:
                return ""
            if verb.word_class is WordClass.VERB and verb.lemma == "ある":
                return cursor.surface() + auxiliary("ない", slots)
            return cursor.surface() + inflect_token(verb, NEGATIVE_SLOTS) + auxiliary("ない", slots)
        return cursor.surface() + inflect_token(prior, NEGATIVE_SLOTS) + auxiliary("ない", slots)

    def _past(self, cursor: TokenCursor, slots: Slots) -> str:
        prior = cursor.pop()
        if prior is None:
            return auxiliary("た", slots)
        if prior.is_auxiliary("です"):
            # でした: render the body up to です as a past stem (だっ)
            cursor.push_back()
            return self._convert(cursor.copy(), PAST_SLOTS) + auxiliary("た", slots)
        if prior.is_auxiliary("ます"):
            verb = cursor.pop()
            if verb is None:
                return auxiliary("た", slots)
            return cursor.surface() + inflect_token(verb, PAST_SLOTS) + past_auxiliary(verb, slots)
        return cursor.surface() + inflect_token(prior, PAST_SLOTS) + past_auxiliary(prior, slots)


def to_plain(clause: Clause) -> str:
    """Convenience function to render one clause plainly."""
    return PlainTransformer().transform(clause)
