"""Unit tests for payload sources."""

import threading

import pytest

from codec.base57 import MAX_VALUE
from core.errors import NegativeValueError, ValueOverflowError
from identifier.entropy import (
    FixedEntropy,
    SecretsEntropy,
    SequenceEntropy,
    UUID4Entropy,
    get_entropy,
)


class TestRandomSources:
    """Tests for the random providers."""

    @pytest.mark.parametrize("source", [UUID4Entropy(), SecretsEntropy()])
    def test_values_fit_128_bits(self, source):
        """Random payloads stay within 128 bits."""
        for _ in range(100):
            assert 0 <= source.next_payload() <= MAX_VALUE

    @pytest.mark.parametrize("source", [UUID4Entropy(), SecretsEntropy()])
    def test_values_do_not_repeat(self, source):
        """Random payloads do not repeat."""
        values = [source.next_payload() for _ in range(1000)]
        assert len(set(values)) == 1000

    def test_uuid4_version_bits(self):
        """uuid4 payloads carry the version nibble."""
        value = UUID4Entropy().next_payload()
        assert (value >> 76) & 0xF == 4

    def test_get_entropy(self):
        """Config names map to providers."""
        assert isinstance(get_entropy("uuid4"), UUID4Entropy)
        assert isinstance(get_entropy("secrets"), SecretsEntropy)

    def test_get_entropy_unknown(self):
        """Unknown names are rejected."""
        with pytest.raises(ValueError):
            get_entropy("dice")


class TestFixedEntropy:
    """Tests for FixedEntropy."""

    def test_repeats_value(self):
        """FixedEntropy returns the same value."""
        source = FixedEntropy(123)
        assert source.next_payload() == 123
        assert source.next_payload() == 123

    def test_rejects_negative(self):
        """Negative values are rejected."""
        with pytest.raises(NegativeValueError):
            FixedEntropy(-1)

    def test_rejects_over_128_bits(self):
        """Values above 128 bits are rejected."""
        with pytest.raises(ValueOverflowError):
            FixedEntropy(MAX_VALUE + 1)


class TestSequenceEntropy:
    """Tests for SequenceEntropy."""

    def test_counts(self):
        """SequenceEntropy advances by step."""
        source = SequenceEntropy(start=5, step=3)
        assert [source.next_payload() for _ in range(3)] == [5, 8, 11]

    def test_wraps_at_128_bits(self):
        """Counter wraps to zero after the maximum."""
        source = SequenceEntropy(start=MAX_VALUE)
        assert source.next_payload() == MAX_VALUE
        assert source.next_payload() == 0

    def test_thread_safe(self):
        """Concurrent callers never get the same value."""
        source = SequenceEntropy()
        seen = []
        lock = threading.Lock()

        def worker():
            values = [source.next_payload() for _ in range(500)]
            with lock:
                seen.extend(values)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert sorted(seen) == list(range(2000))
