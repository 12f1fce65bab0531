"""Exceptions raised during register conversion."""


class RegisterError(Exception):
    """Base class for register conversion failures."""
    pass


class UnsupportedCopulaPairing(RegisterError):
    """Raised when the copula table has no entry for a (lemma, form) pair.

    This means the rule table is incomplete, not that the input is bad, so
    the whole conversion is aborted.
    """

    def __init__(self, lemma: str, form):
        self.lemma = lemma
        self.form = form
        super().__init__(f"unsupported copula pairing: ({lemma!r}, {form})")


class UnsupportedConjugation(RegisterError):
    """Raised when no inflection rule exists for a surface and form pair."""

    def __init__(self, surface: str, kind, from_form, to_form):
        self.surface = surface
        self.kind = kind
        self.from_form = from_form
        self.to_form = to_form
        super().__init__(
            f"cannot conjugate {surface!r} ({kind}) from {from_form} to {to_form}"
        )
