import pytest

from bitsquat.services.bitsquatter import Bitsquatter, perform_bitsquatting
from bitsquat.services.errors import EncodingError, SplitError

EXPECTED_AB_CO = ["ab.co", "qb.co", "ib.co", "eb.co", "cb.co", "ar.co", "aj.co", "af.co", "ac.co", "ab.co"]


def test_split_and_bitstrings():
    squatter = Bitsquatter("https://ab.co")
    assert (squatter.domain, squatter.extension) == ("ab", "co")
    assert squatter.bitstrings() == ("0110000101100010", "0110001101101111")


def test_candidate_count_with_fixed_extension():
    candidates = Bitsquatter("ab.co").candidates()
    assert len(candidates) == 8 * 2 + 1


def test_candidate_count_with_extension_permutation():
    candidates = Bitsquatter("abc.co", permutate_extension=True).candidates()
    assert len(candidates) == (8 * 3 + 1) * (8 * 2 + 1)


def test_identity_slot_and_first_flip():
    candidates = Bitsquatter("ab.co").candidates()
    assert candidates[0].domain == "ab.co"
    assert candidates[1].domain == "!b.co"
    assert candidates[2].domain == "Ab.co"
    assert candidates[-1].domain == "ab.co"


def test_candidates_keep_label_lengths():
    for candidate in Bitsquatter("foobar.com", permutate_extension=True).candidates():
        domain, extension = candidate.domain[:6], candidate.domain[7:]
        assert candidate.domain[6] == "."
        assert len(domain) == 6 and len(extension) == 3


def test_extension_mode_order():
    candidates = Bitsquatter("ab.co", permutate_extension=True).candidates()
    indexes = [(c.domain_variant, c.extension_variant) for c in candidates]
    assert indexes == [(i, j) for i in range(17) for j in range(17)]
    assert [c.index for c in candidates] == list(range(17 * 17))


def test_valid_permutations_for_scenario():
    assert perform_bitsquatting("ab.co") == EXPECTED_AB_CO


def test_validator_gates_output():
    squatter = Bitsquatter("ab.co", validator=lambda candidate: candidate.replace(".", "").isalnum())
    domains = [c.domain for c in squatter.permutations()]
    assert "!b.co" not in domains
    assert "ab.co" in domains
    assert "Ab.co" in domains


def test_output_is_ordered_subsequence_of_candidates():
    squatter = Bitsquatter("foobar.com", permutate_extension=True)
    generated = [c.index for c in squatter.candidates()]
    emitted = [c.index for c in squatter.permutations()]
    assert emitted == sorted(emitted)
    assert set(emitted) <= set(generated)
    assert len(emitted) < len(generated)


def test_validator_called_once_per_candidate_in_order():
    seen = []

    def record(candidate):
        seen.append(candidate)
        return False

    squatter = Bitsquatter("ab.co", validator=record)
    assert squatter.permutations() == []
    assert seen == [c.domain for c in squatter.candidates()]


def test_strict_mode_emits_single_bit_neighbours_only():
    squatter = Bitsquatter("ab.co", strict=True)
    assert len(squatter.candidates()) == 16
    assert perform_bitsquatting("ab.co", strict=True) == EXPECTED_AB_CO[1:-1]


def test_strict_mode_with_extension():
    squatter = Bitsquatter("ab.co", permutate_extension=True, strict=True)
    candidates = squatter.candidates()
    assert len(candidates) == 16 + 16
    assert all(c.domain.endswith(".co") for c in candidates[:16])
    assert all(c.domain.startswith("ab.") for c in candidates[16:])
    assert "ab.co" not in [c.domain for c in candidates]


def test_split_error_aborts_before_generation():
    with pytest.raises(SplitError):
        Bitsquatter("localhost")


def test_encoding_error_is_reported(monkeypatch):
    monkeypatch.setattr("bitsquat.services.bitsquatter.split_url", lambda url: ("bād", "com"))
    with pytest.raises(EncodingError):
        Bitsquatter("bad.com")
