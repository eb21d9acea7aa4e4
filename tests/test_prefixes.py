"""Tests for mate pattern inference."""

import pytest
from pairedscan.config import PairingConfig
from pairedscan.errors import ConfigurationError
from pairedscan.prefixes import build_mate_pattern, infer_patterns


class TestInferPatterns:
    """Tests for infer_patterns."""

    def test_defaults(self):
        pattern_1, pattern_2 = infer_patterns(PairingConfig())
        assert pattern_1.token == "R1"
        assert pattern_2.token == "R2"
        assert pattern_1 is not pattern_2

    def test_individual_prefixes(self):
        pattern_1, pattern_2 = infer_patterns(PairingConfig(prefix_1="_1", prefix_2="_2"))
        assert pattern_1.token == "_1"
        assert pattern_2.token == "_2"
        assert pattern_1.identity("sample_1.fq") == "sample.fq"
        assert pattern_2.identity("sample_2.fq") == "sample.fq"

    def test_shared_prefix_is_one_pattern(self):
        """The same pattern object serves both mates."""
        pattern_1, pattern_2 = infer_patterns(PairingConfig(prefix_paired="RX"))
        assert pattern_1 is pattern_2
        assert pattern_1.token == "RX"

    def test_shared_placeholder_matches_either_mate(self):
        pattern, _ = infer_patterns(PairingConfig(prefix_paired="RX"))
        assert pattern.identity("a_R1.fq") == "a_.fq"
        assert pattern.identity("a_R2.fq") == "a_.fq"
        assert pattern.match("a_R3.fq") is None

    def test_shared_placeholder_matches_itself(self):
        pattern, _ = infer_patterns(PairingConfig(prefix_paired="X"))
        assert pattern.identity("sample_X.fq") == "sample_.fq"

    @pytest.mark.parametrize("prefixes", [
        {"prefix_paired": "RX", "prefix_1": "R1"},
        {"prefix_paired": "RX", "prefix_2": "R2"},
        {"prefix_paired": "RX", "prefix_1": "R1", "prefix_2": "R2"},
    ])
    def test_shared_and_individual_are_exclusive(self, prefixes):
        with pytest.raises(ConfigurationError, match="shared prefix"):
            infer_patterns(PairingConfig(**prefixes))

    @pytest.mark.parametrize("prefixes", [
        {"prefix_1": "R1"},
        {"prefix_2": "R2"},
    ])
    def test_partial_prefixes_rejected(self, prefixes):
        with pytest.raises(ConfigurationError, match="Both mate prefixes"):
            infer_patterns(PairingConfig(**prefixes))

    @pytest.mark.parametrize("prefix_1, prefix_2, name", [
        ("R[1", "R[2", "s_R[1.fq"),
        ("_1.", "_2.", "s_1..fq"),
        ("(1)", "(2)", "s(1).fq"),
    ])
    def test_prefixes_match_literally(self, prefix_1, prefix_2, name):
        """Characters with special meaning in patterns are plain text in prefixes."""
        pattern_1, _ = infer_patterns(PairingConfig(prefix_1=prefix_1, prefix_2=prefix_2))
        assert pattern_1.regex.groups == 2
        assert pattern_1.match(name) is not None

    def test_dot_in_prefix_is_not_a_wildcard(self):
        pattern_1, _ = infer_patterns(PairingConfig(prefix_1="_1.", prefix_2="_2."))
        assert pattern_1.match("s_1x.fq") is None

    def test_shared_prefix_escapes_around_placeholder(self):
        pattern, _ = infer_patterns(PairingConfig(prefix_paired="R.X"))
        assert pattern.identity("a_R.1.fq") == "a_.fq"
        assert pattern.match("a_Rx1.fq") is None


class TestBuildMatePattern:
    """Tests for build_mate_pattern."""

    def test_binds_first_occurrence(self):
        """The token is removed where it first appears."""
        pattern = build_mate_pattern("R1")
        m = pattern.match("R1_run_R1.fq")
        assert m.group(1) == ""
        assert m.group(2) == "_run_R1.fq"
        assert pattern.identity("sample_R1_lane_R1.fq") == "sample__lane_R1.fq"

    def test_no_match(self):
        pattern = build_mate_pattern("R1")
        assert pattern.match("sample_R2.fq") is None
        assert pattern.identity("sample_R2.fq") is None

    def test_special_characters_escaped(self):
        pattern = build_mate_pattern("(R)1")
        assert pattern.regex.groups == 2
        assert pattern.identity("a_(R)1.fq") == "a_.fq"
        assert pattern.match("a_R1.fq") is None

    def test_precompiled_fragment(self):
        pattern = build_mate_pattern("RX", "R[12X]")
        assert pattern.token == "RX"
        assert pattern.identity("a_R2.fq") == "a_.fq"

    def test_uncompilable_fragment_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_mate_pattern("R[1", "R[1")
        assert exc_info.value.context["prefix"] == "R[1"

    def test_empty_prefix_rejected(self):
        with pytest.raises(ConfigurationError):
            build_mate_pattern("")

    def test_description(self):
        assert str(build_mate_pattern("R1")) == '"R1"'
