"""Tests for plain-to-polite rewriting."""

import pytest

from desumasu.errors import UnsupportedConjugation, UnsupportedCopulaPairing
from desumasu.models import ConjugationForm as F, ConjugationKind as K, Postpositional as P, Symbol as S
from desumasu.register.polite import PoliteTransformer, copula, make_continuous, to_polite
from desumasu.register.splitter import split_clauses
from tests.fixtures.ipadic import LEXICON, adj, aux, clause, noun, particle, symbol, verb


def polite(text):
    return "".join(PoliteTransformer().transform(c) for c in split_clauses(LEXICON[text]))


class TestPoliteSentences:
    """Whole-sentence rewrites."""

    @pytest.mark.parametrize("source,expected", [
        ("今日は晴天だ。", "今日は晴天です。"),
        ("今日は勉強をしよう。", "今日は勉強をしましょう。"),
        ("許さん。", "許しません。"),
        ("今日は寒かった。", "今日は寒かったです。"),
        ("今日はいい天気か。", "今日はいい天気ですか。"),
        ("過去は変わらない。", "過去は変わりません。"),
        ("最善を尽くすことである。", "最善を尽くすことです。"),
        ("今日は晴天だが、明日は雨だ。", "今日は晴天ですが、明日は雨です。"),
        ("彼は「我慢しなさい。」と言った。", "彼は「我慢しなさい。」と言いました。"),
        ("行かなかった。", "行きませんでした。"),
        ("明日は雨だろう。", "明日は雨でしょう。"),
        ("今日は晴天だ", "今日は晴天です。"),
    ])
    def test_rewrite(self, source, expected):
        """Test plain sentences become polite."""
        assert polite(source) == expected

    @pytest.mark.parametrize("text", [
        "今日は晴天です。",
        "京都大学の重要な目標です。",
        "今日は勉強をしましょう。",
        "許しません。",
    ])
    def test_polite_input_is_unchanged(self, text):
        """Test already polite sentences pass through."""
        assert polite(text) == text


class TestPoliteRules:
    """Individual predicate rules."""

    @pytest.fixture
    def transformer(self):
        return PoliteTransformer()

    def test_empty_clause(self, transformer):
        """Test a clause with only a separator."""
        assert transformer.transform(clause()) == "。"

    def test_only_ending_particles(self, transformer):
        """Test particles are kept when there is no predicate."""
        assert transformer.transform(clause(particle("か", P.END))) == "か。"

    def test_existential_after_noun(self, transformer):
        """Test ある after a particle becomes あります."""
        body = (noun("本"), particle("が"), aux("ある", "ある", K.GODAN_RA_ARU))
        assert transformer.transform(clause(*body)) == "本があります。"

    def test_existential_alone(self, transformer):
        """Test a bare ある."""
        assert transformer.transform(clause(aux("ある", "ある", K.GODAN_RA_ARU))) == "あります。"

    def test_negative_after_de(self, transformer):
        """Test ではない becomes ではありません."""
        body = (noun("雨"), aux("で", "で"), adj("ない", "ない"))
        assert transformer.transform(clause(*body)) == "雨ではありません。"

    def test_negative_adjective(self, transformer):
        """Test an adjective followed by ない."""
        body = (adj("寒く", "寒い", F.CONTINUOUS), adj("ない", "ない"))
        assert transformer.transform(clause(*body)) == "寒くありません。"

    def test_bare_negative(self, transformer):
        """Test ない on its own."""
        assert transformer.transform(clause(adj("ない", "ない"))) == "ありません。"

    def test_past_copula(self, transformer):
        """Test だった becomes でした."""
        body = (noun("雨"), aux("だっ", "だ", K.SPECIAL_DA, F.CONTINUOUS_TA), aux("た", "た", K.SPECIAL_TA))
        assert transformer.transform(clause(*body)) == "雨でした。"

    def test_default_appends_desu(self, transformer):
        """Test a bare noun gets です."""
        assert transformer.transform(clause(noun("雨"))) == "雨です。"

    def test_suru_compound(self, transformer):
        """Test 愛する becomes 愛します."""
        body = (verb("愛する", "愛する", K.SAHEN_SURU_CONNECTED, F.BASIC),)
        assert transformer.transform(clause(*body)) == "愛します。"

    def test_zuru_compound(self, transformer):
        """Test 信ずる becomes 信じます."""
        body = (verb("信ずる", "信ずる", K.SAHEN_ZURU_CONNECTED, F.BASIC),)
        assert transformer.transform(clause(*body)) == "信じます。"

    def test_passive_verb(self, transformer):
        """Test 運転される becomes 運転されます."""
        body = (noun("運転"), verb("さ", "する", K.SAHEN_SURU, F.NEGATIVE), verb("れる", "れる", K.ICHIDAN, F.BASIC))
        assert transformer.transform(clause(*body)) == "運転されます。"

    def test_negative_passive_verb(self, transformer):
        """Test 運転されない becomes 運転されません."""
        body = (
            noun("運転"),
            verb("さ", "する", K.SAHEN_SURU, F.NEGATIVE),
            verb("れ", "れる", K.ICHIDAN, F.NEGATIVE),
            aux("ない", "ない", K.SPECIAL_NAI),
        )
        assert transformer.transform(clause(*body)) == "運転されません。"

    def test_trailing_space_is_kept_after_predicate(self, transformer):
        """Test whitespace at the end of a clause is not taken as the predicate."""
        body = (noun("雨"), aux("だ", "だ", K.SPECIAL_DA), symbol(" ", S.SPACE))
        assert transformer.transform(clause(*body)) == "雨です 。"

    def test_ichidan_ru_keeps_lemma(self, transformer):
        """Test the single-row ru paradigm passes its lemma through."""
        body = (verb("射る", "射る", K.ICHIDAN_RU, F.BASIC),)
        assert transformer.transform(clause(*body)) == "射るます。"

    def test_unsupported_copula_pairing(self, transformer):
        """Test contracted negative after the copula has no polite form."""
        body = (noun("雨"), aux("だ", "だ", K.SPECIAL_DA), aux("ん", "ん"))
        with pytest.raises(UnsupportedCopulaPairing):
            transformer.transform(clause(*body))

    def test_unknown_verb_paradigm(self, transformer):
        """Test a verb without conjugation data."""
        with pytest.raises(UnsupportedConjugation):
            transformer.transform(clause(verb("走る", "走る", K.NONE, F.NONE)))

    def test_to_polite(self):
        """Test the convenience function."""
        assert to_polite(clause(noun("雨"), aux("だ", "だ", K.SPECIAL_DA))) == "雨です。"


class TestCopula:
    """Tests for the polite auxiliary table."""

    def test_known_pairs(self):
        """Test every table entry."""
        assert copula("です", F.BASIC) == "です"
        assert copula("です", F.NEGATIVE_U) == "でしょ"
        assert copula("ます", F.NEGATIVE) == "ませ"
        assert copula("ます", F.NEGATIVE_U) == "ましょ"

    def test_unknown_pair(self):
        """Test a pairing the table lacks."""
        with pytest.raises(UnsupportedCopulaPairing) as exc_info:
            copula("です", F.NEGATIVE)
        assert exc_info.value.lemma == "です"
        assert exc_info.value.form is F.NEGATIVE


class TestMakeContinuous:
    """Tests for the masu stem."""

    @pytest.mark.parametrize("token,expected", [
        (verb("書く", "書く", K.GODAN_KA, F.BASIC), "書き"),
        (verb("言っ", "言う", K.GODAN_WA, F.CONTINUOUS_TA), "言い"),
        (verb("食べる", "食べる", K.ICHIDAN, F.BASIC), "食べ"),
        (verb("しよ", "する", K.SAHEN_SURU, F.NEGATIVE_U), "し"),
        (verb("来る", "来る", K.KAHEN, F.BASIC), "来"),
        (aux("ない", "ない", K.SPECIAL_NAI), "ないで"),
    ])
    def test_stems(self, token, expected):
        """Test continuative stems for several paradigms."""
        assert make_continuous(token) == expected
