"""128-bit payload sources for identifier generation."""

import secrets
import threading
import uuid

from codec.base57 import MAX_VALUE, to_unsigned


class UUID4Entropy:
    """Random version-4 UUID value (default source)."""

    name = "uuid4"

    def next_payload(self):
        return uuid.uuid4().int


class SecretsEntropy:
    """Full 128 bits straight from the OS CSPRNG."""

    name = "secrets"

    def next_payload(self):
        return secrets.randbits(128)


class FixedEntropy:
    """Same payload every call."""

    name = "fixed"

    def __init__(self, value):
        self.value = to_unsigned(value, "payload")

    def next_payload(self):
        return self.value


class SequenceEntropy:
    """Counter starting at start, advancing by step; wraps at 128 bits."""

    name = "sequence"

    def __init__(self, start=0, step=1):
        self._next = to_unsigned(start, "start")
        self._step = to_unsigned(step, "step")
        self._lock = threading.Lock()

    def next_payload(self):
        with self._lock:
            value = self._next
            self._next = (self._next + self._step) & MAX_VALUE
            return value


_PROVIDERS = {
    UUID4Entropy.name: UUID4Entropy,
    SecretsEntropy.name: SecretsEntropy,
}


def get_entropy(name):
    """Random provider by config name ("uuid4" or "secrets")."""
    try:
        return _PROVIDERS[name]()
    except KeyError:
        raise ValueError(f"Unknown entropy source: {name!r}") from None
