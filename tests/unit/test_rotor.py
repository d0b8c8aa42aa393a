"""Tests for the rotating substitution wheel."""

import string

import pytest

from prt7_decoder.cipher import ALPHABET, RotorWheel


class TestRotorWheelConstruction:
    """Test wheel initial state."""

    def test_starts_at_rest(self):
        """Test that a new wheel has 'A' at the origin."""
        wheel = RotorWheel()
        assert wheel.origin == "A"
        assert wheel.position == 0
        assert len(wheel) == 26

    def test_identity_mapping_at_rest(self):
        """Test that every letter maps to itself before any rotation."""
        wheel = RotorWheel()
        for letter in string.ascii_uppercase:
            assert wheel.decode(letter) == letter

    def test_sequence_reads_from_origin(self):
        """Test the wheel dump starts at the origin and wraps around."""
        wheel = RotorWheel()
        wheel.rotate(24)
        sequence = wheel.sequence()
        assert sequence[:3] == ("Y", "Z", "A")
        assert sorted(sequence) == list(ALPHABET)
        assert list(wheel) == list(sequence)


class TestRotorWheelRotation:
    """Test origin movement."""

    def test_forward_rotation(self):
        wheel = RotorWheel()
        wheel.rotate(2)
        assert wheel.origin == "C"

    def test_backward_rotation_wraps(self):
        wheel = RotorWheel()
        wheel.rotate(-2)
        assert wheel.origin == "Y"

    def test_large_magnitudes_wrap(self):
        """Test rotations beyond one lap behave like n mod 26."""
        wheel = RotorWheel()
        wheel.rotate(26 * 4 + 3)
        assert wheel.origin == "D"
        wheel.rotate(-(26 * 7) - 3)
        assert wheel.origin == "A"

    def test_zero_rotation_is_noop(self):
        wheel = RotorWheel()
        wheel.rotate(5)
        before = [wheel.decode(c) for c in ALPHABET]
        wheel.rotate(0)
        assert [wheel.decode(c) for c in ALPHABET] == before
        assert wheel.origin == "F"

    @pytest.mark.parametrize("n", [1, 7, 25, 26, 31, 100, -1, -13, -27])
    def test_rotation_round_trip(self, n):
        """Test rotate(n) followed by rotate(-n) restores the mapping."""
        wheel = RotorWheel()
        wheel.rotate(3)
        before = [wheel.decode(c) for c in ALPHABET]
        wheel.rotate(n)
        wheel.rotate(-n)
        assert [wheel.decode(c) for c in ALPHABET] == before


class TestRotorWheelDecode:
    """Test symbol lookup through the wheel."""

    def test_decode_matches_cyclic_offset(self):
        """Test decode(c) after rotate(r) is the letter at (c + r) mod 26."""
        for r in range(-60, 61):
            wheel = RotorWheel()
            wheel.rotate(r)
            for index, letter in enumerate(ALPHABET):
                assert wheel.decode(letter) == ALPHABET[(index + r) % 26]

    def test_documented_examples(self):
        wheel = RotorWheel()
        assert wheel.decode("C") == "C"
        wheel.rotate(2)
        assert wheel.decode("A") == "C"
        assert wheel.decode("W") == "Y"

    def test_backward_rotation_decode(self):
        """Test origin 'Y' decodes 'W' to 'U': (24 + 22) mod 26 = 20."""
        wheel = RotorWheel()
        wheel.rotate(-2)
        assert wheel.decode("W") == "U"

    @pytest.mark.parametrize("rotation", [0, 1, -5, 40])
    def test_space_is_never_enciphered(self, rotation):
        wheel = RotorWheel()
        wheel.rotate(rotation)
        assert wheel.decode(" ") == " "

    @pytest.mark.parametrize("symbol", ["a", "z", "0", "!", "@", "[", "ñ"])
    def test_out_of_alphabet_passes_through(self, symbol):
        wheel = RotorWheel()
        wheel.rotate(7)
        assert wheel.decode(symbol) == symbol

    def test_decode_does_not_mutate(self):
        wheel = RotorWheel()
        wheel.rotate(4)
        for letter in ALPHABET:
            wheel.decode(letter)
        assert wheel.origin == "E"
