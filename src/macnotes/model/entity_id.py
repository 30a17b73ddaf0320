# SPDX-License-Identifier: MIT

import re
import uuid
from typing import Optional, TypeAlias

EntityId: TypeAlias = str

_UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def parse_entity_id(value: str) -> Optional[EntityId]:
    """
    Validate a hyphenated UUID string such as a note filename stem.

    The value is returned unchanged (including its letter case) so that a
    note loaded from disk is written back under the exact same filename.
    """
    if _UUID_PATTERN.match(value) is None:
        return None
    return value
