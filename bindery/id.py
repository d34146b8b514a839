import itertools
import os
import random
import re
import time

_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$", re.IGNORECASE)

# 5 random bytes fixed for the life of the process
_PROCESS_UNIQUE = os.urandom(5)
_counter = itertools.count(random.randrange(0x800000))


def new_id() -> str:
    """Return a 24-char hex id: timestamp, process-unique bytes, counter.

    Ids made by the same process sort in creation order.
    """
    seconds = int(time.time()).to_bytes(4, "big")
    count = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (seconds + _PROCESS_UNIQUE + count).hex()


def is_valid_id(value: object) -> bool:
    return isinstance(value, str) and _ID_PATTERN.match(value) is not None


def normalize_id(value: str) -> str:
    """Ids are stored lowercase; either case is accepted on input."""
    return value.lower()
