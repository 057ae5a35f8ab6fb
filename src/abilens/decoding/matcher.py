"""Signature matching: pick the ABI event whose topic0 equals the log's."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from abilens.abi_events import AbiEvent, get_event_signature, get_signature_topic0
from abilens.core.models import MatchedEvent

logger = logging.getLogger(__name__)


def match_event(topic0: str, events: Iterable[AbiEvent]) -> MatchedEvent | None:
    """Return the first event (in ABI order) whose signature hash is `topic0`."""
    for event in events:
        signature = get_event_signature(event)
        event_topic0 = get_signature_topic0(signature)
        if event_topic0 == topic0:
            matched = MatchedEvent(event=event, signature=signature, topic0=event_topic0)
            logger.debug("topic0 %s matched %s", matched.topic0, matched.signature)
            return matched
    logger.debug("topic0 %s matched no event", topic0)
    return None
