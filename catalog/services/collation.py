"""Pinned string collation for catalog names.

Names are compared with the Unicode Collation Algorithm using the default
(root) collation element table, so ordering does not depend on the host's
locale settings. Accented letters sort with their base letter
("Área Externa" sorts among the A's).
"""
from functools import lru_cache
from typing import Tuple

from pyuca import Collator


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    """Build the process-wide collator (loads the collation table once)"""
    return Collator()


def collation_key(text: str) -> Tuple[int, ...]:
    """Sort key for `text` under the pinned collation"""
    return get_collator().sort_key(text)
