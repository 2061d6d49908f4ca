"""Random token helpers shared by the SSRC and candidate codecs."""

from __future__ import annotations

import random

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def random_int(low: int, high: int) -> int:
    """Return a random integer in ``[low, high]`` (both ends inclusive).

    Draws from the process-wide :mod:`random` source, which is not
    cryptographically secure and makes no uniqueness promise.
    """
    return random.randint(low, high)


def generate_candidate_id(length: int = 10) -> str:
    """Generate a short base-36 token used as a local candidate id.

    The token has no meaning on the wire and may collide.
    """
    return "".join(_BASE36[random_int(0, 35)] for _ in range(length))
