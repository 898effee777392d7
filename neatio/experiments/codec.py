"""Binary value stream used for experiment persistence.

The stream is a plain sequence of self-delimiting pickle records, one per
encoded value, with no header, tag or length prefix of its own. Containers
define their layout purely by the order in which they encode values, and
decoders must read them back in exactly the same order.

Only decode streams from trusted sources: records are ordinary pickles.
"""

from __future__ import annotations

import logging
import pickle
from typing import IO, Any

from neatio.utils.validation import ExperimentDecodeError


def _matches(value: Any, expected_type: type | tuple[type, ...]) -> bool:
    # bool is an int subclass; only accept it when asked for explicitly
    if isinstance(value, bool):
        allowed = expected_type if isinstance(expected_type, tuple) else (expected_type,)
        return bool in allowed
    return isinstance(value, expected_type)


class ValueEncoder:
    """Appends values to a binary stream."""

    def __init__(self, stream: IO[bytes], protocol: int | None = None) -> None:
        self.stream = stream
        self.protocol = pickle.DEFAULT_PROTOCOL if protocol is None else int(protocol)
        self.count = 0

    def encode(self, value: Any) -> None:
        pickle.dump(value, self.stream, protocol=self.protocol)
        self.count += 1


class ValueDecoder:
    """Reads values back from a stream produced by :class:`ValueEncoder`."""

    def __init__(self, stream: IO[bytes]) -> None:
        self.stream = stream
        self.count = 0

    def decode(self, expected_type: type | tuple[type, ...] | None = None) -> Any:
        """Read the next value.

        Args:
            expected_type: If given, the value must be an instance of it

        Raises:
            ExperimentDecodeError: on a short read, a corrupt record, or a
                value of the wrong type
        """
        try:
            value = pickle.load(self.stream)
        except EOFError as exc:
            raise ExperimentDecodeError("Unexpected end of stream", position=self.count) from exc
        except (pickle.UnpicklingError, AttributeError, ImportError, IndexError, ValueError) as exc:
            raise ExperimentDecodeError("Corrupt record in stream", position=self.count) from exc

        if expected_type is not None and not _matches(value, expected_type):
            logging.error("Decoded value at position %d has unexpected type %s", self.count, type(value).__name__)
            raise ExperimentDecodeError(
                "Unexpected value type",
                position=self.count,
                expected=getattr(expected_type, "__name__", str(expected_type)),
                actual=type(value).__name__,
            )
        self.count += 1
        return value


__all__ = ["ValueEncoder", "ValueDecoder"]
