"""
Permission nodes and the host-side capabilities the command surface consumes.

The host decides who holds which node and which players are online; this
package only asks.
"""

from typing import Optional, Protocol, runtime_checkable

PERM_CREATE = "mcengine.premium.rank.create"
PERM_UPGRADE = "mcengine.premium.rank.upgrade"
PERM_GET_SELF = "mcengine.premium.rank.get"
PERM_GET_OTHERS = "mcengine.premium.rank.get.players"

ALL_PERMISSIONS = (PERM_CREATE, PERM_UPGRADE, PERM_GET_SELF, PERM_GET_OTHERS)


@runtime_checkable
class Actor(Protocol):
    """Whoever issued the command. player_id is None for a console."""

    name: str
    player_id: Optional[str]

    def has_permission(self, node: str) -> bool:
        ...


@runtime_checkable
class PlayerDirectory(Protocol):
    """Lookup of currently reachable players."""

    def find_online(self, name: str) -> Optional[Actor]:
        """Exact-name lookup. None if the player isn't online."""
        ...

    def online_names(self) -> list[str]:
        ...
