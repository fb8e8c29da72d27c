import uuid

from utils.timestamp import format_timestamp, micros_to_datetime


class IdentifierParts:
    """Decoded halves of an identifier."""

    __slots__ = ("id", "timestamp", "payload")

    def __init__(self, id, timestamp, payload):
        self.id, self.timestamp, self.payload = id, timestamp, payload

    @property
    def uuid(self):
        return uuid.UUID(int=self.payload)

    @property
    def datetime(self):
        return micros_to_datetime(self.timestamp)

    def __eq__(self, other):
        if not isinstance(other, IdentifierParts):
            return NotImplemented
        return (self.id, self.timestamp, self.payload) == (other.id, other.timestamp, other.payload)

    def __hash__(self):
        return hash((self.id, self.timestamp, self.payload))

    def __repr__(self):
        return f"IdentifierParts(id={self.id!r}, timestamp={self.timestamp}, payload={self.payload})"

    def to_dict(self):
        try:
            time = format_timestamp(self.timestamp)
        except (OverflowError, ValueError, OSError):
            # beyond datetime's year 9999
            time = None
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "time": time,
            "payload": self.payload,
            "uuid": str(self.uuid),
        }
