"""Domain Types — identity wrappers used across repositories and routes.

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Integer identities: store-assigned autoincrement keys
"""

from typing import NewType

CheepId = NewType("CheepId", int)
