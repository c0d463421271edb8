# domain/degradation.py
from __future__ import annotations

from enum import Enum


class Degradation(str, Enum):
    """
    Ways a log event can fall back to best-effort output.

    None of these are raised; they are attached to diagnostic records so a
    degraded line can be traced back to its cause.
    """

    MISSING_REQUEST = "missing_request"
    EMPTY_NETWORK_RESPONSE = "empty_network_response"
    UNDECODABLE_BODY = "undecodable_body"
    UNSUPPORTED_REPLAY_BODY = "unsupported_replay_body"
    FORMATTER_FAILURE = "formatter_failure"
    EMITTER_FAILURE = "emitter_failure"
