from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from abilens.core.models import DecodedArgument, LogRecord, MatchedEvent


def assemble(
    record: LogRecord,
    matched: MatchedEvent,
    topic_args: Sequence[DecodedArgument],
    data_args: Sequence[DecodedArgument],
) -> dict[str, Any]:
    """Merge decoded arguments and log metadata into a copy of the input record.

    Arguments are ordered topic-decoded first, then data-decoded; this is not
    necessarily the event's declaration order.
    """
    out: dict[str, Any] = dict(record.raw)
    out["hash"] = record.tx_hash
    out["block"] = str(record.block_number)
    out["signature"] = matched.signature
    out["arguments"] = [arg.as_dict() for arg in (*topic_args, *data_args)]
    return out


def passthrough(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Return the input record unchanged (as a new dict)."""
    return dict(raw)
