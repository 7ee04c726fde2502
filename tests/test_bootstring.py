"""Unit tests for the Bootstring (Punycode) encoder.

Tests cover:
- Threshold clamping and bias adaptation
- Generalized variable-length integers
- RFC 3492 section 7.1 sample strings
- ACE label passthrough and prefixing
- Agreement with the idna package on lowercase labels
"""

import idna
import pytest

from idna_mcp_server.codec.bootstring import (
    ACE_PREFIX,
    TMAX,
    TMIN,
    adapt,
    encode_integer,
    encode_label,
    is_basic,
    punycode_encode,
    threshold,
)


def cps(text: str) -> list[int]:
    return [ord(c) for c in text]


@pytest.mark.unit
class TestThreshold:
    """Threshold clamping to [tmin, tmax]."""

    def test_clamped_low(self):
        assert threshold(36, 72) == TMIN

    def test_clamped_high(self):
        assert threshold(108, 72) == TMAX

    def test_in_between(self):
        assert threshold(80, 72) == 8


@pytest.mark.unit
class TestAdapt:
    """Bias adaptation."""

    def test_small_first_delta_is_damped(self):
        assert adapt(124, 1, True) == 0

    def test_zero_delta(self):
        assert adapt(0, 1, False) == 0

    def test_large_delta_divides(self):
        # 1000 // 2 = 500, + 500 // 1 = 1000, one division by 35 -> 28
        assert adapt(1000, 1, False) == 36 + (36 * 28) // (28 + 38)


@pytest.mark.unit
class TestEncodeInteger:
    """Generalized variable-length integers."""

    def test_multi_digit(self):
        assert encode_integer(124, 72) == "tda"

    def test_single_digit_below_threshold(self):
        assert encode_integer(0, 72) == "a"

    def test_digit_alphabet_reaches_numbers(self):
        # threshold(36, 0) is clamped to TMAX so values up to 25 are one digit
        assert encode_integer(25, 0) == "z"


@pytest.mark.unit
class TestPunycodeEncode:
    """RFC 3492 section 7.1 samples and other known vectors."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("ليهمابتكلموشعربي؟", "egbpdaj6bu4bxfgehfvwxn"),
            ("他们为什么不说中文", "ihqwcrb4cv8a8dqg056pqjye"),
            ("他們爲什麽不說中文", "ihqwctvzc91f659drss3x8bo0yb"),
            ("Pročprostěnemluvíčesky", "Proprostnemluvesky-uyb24dma41a"),
            ("למההםפשוטלאמדבריםעברית", "4dbcagdahymbxekheh6e0a7fei0b"),
            (
                "यहलोगहिन्दीक्योंनहींबोलसकतेहैं",
                "i1baa7eci9glrd9b2ae1bj0hfcgg6iyaf8o0a1dig0cd",
            ),
            ("なぜみんな日本語を話してくれないのか", "n8jok5ay5dzabd5bym9f0cm5685rrjetr6pdxa"),
            (
                "세계의모든사람들이한국어를이해한다면얼마나좋을까",
                "989aomsvi5e83db1d2a355cv1e0vak1dwrv93d5xbh15a0dt30a5jpsd879ccm6fea98c",
            ),
            ("почемужеонинеговорятпорусски", "b1abfaaepdrnnbgefbadotcwatmq2g4l"),
            (
                "PorquénopuedensimplementehablarenEspañol",
                "PorqunopuedensimplementehablarenEspaol-fmd56a",
            ),
            ("TạisaohọkhôngthểchỉnóitiếngViệt", "TisaohkhngthchnitingVit-kjcr8268qyxafd2f1b9g"),
            ("3年B組金八先生", "3B-ww4c5e180e575a65lsy2b"),
            ("安室奈美恵-with-SUPER-MONKEYS", "-with-SUPER-MONKEYS-pc58ag80a8qai00g7n9n"),
            ("Hello-Another-Way-それぞれの場所", "Hello-Another-Way--fc4qua05auwb3674vfr0b"),
            ("ひとつ屋根の下2", "2-u9tlzr9756bt3uc0v"),
            ("MajiでKoiする5秒前", "MajiKoi5-783gue6qz075azm5e"),
            ("パフィーdeルンバ", "de-jg4avhby1noc0d"),
            ("そのスピードで", "d9juau41awczczp"),
        ],
    )
    def test_rfc3492_samples(self, text, expected):
        assert punycode_encode(cps(text)) == expected

    def test_all_basic_gets_trailing_delimiter(self):
        assert punycode_encode(cps("abc")) == "abc-"

    def test_empty(self):
        assert punycode_encode([]) == ""

    def test_astral_code_point(self):
        assert punycode_encode([0x1F4A9]) == "ls8h"

    def test_matches_stdlib_codec(self):
        text = "üëäö♥"
        assert punycode_encode(cps(text)) == text.encode("punycode").decode("ascii")


@pytest.mark.unit
class TestEncodeLabel:
    """ACE label form."""

    def test_basic_label_passes_through(self):
        assert encode_label(cps("Example-")) == "Example-"

    def test_empty_label(self):
        assert encode_label([]) == ""

    def test_ace_label_is_unchanged(self):
        assert encode_label(cps("xn--tda")) == "xn--tda"

    def test_preserves_case_of_basic_code_points(self):
        assert encode_label(cps("Bücher")) == "xn--Bcher-kva"

    def test_non_basic_label_gets_prefix(self):
        assert encode_label(cps("ü")) == ACE_PREFIX + "tda"

    @pytest.mark.parametrize(
        "label", ["bücher", "mañana", "café", "straße", "münchen", "москва", "中国", "ü"]
    )
    def test_matches_idna_package(self, label):
        assert encode_label(cps(label)) == idna.alabel(label).decode("ascii")


@pytest.mark.unit
def test_is_basic_boundary():
    assert is_basic(0x7F)
    assert not is_basic(0x80)
