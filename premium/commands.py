"""
/premium command dispatcher.

Subcommands:

    create <rankType>               mcengine.premium.rank.create
    upgrade <rankType>              mcengine.premium.rank.upgrade       (players only)
    get <rankType>                  mcengine.premium.rank.get           (players only)
    get <playerOnline> <rankType>   mcengine.premium.rank.get.players

dispatch() never raises for user mistakes and never touches the store
before the permission check has passed. Every answer is an Outcome: a
Status the host can branch on plus the text lines to show the actor.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from .permissions import (
    PERM_CREATE,
    PERM_GET_OTHERS,
    PERM_GET_SELF,
    PERM_UPGRADE,
    Actor,
    PlayerDirectory,
)

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "premium"


class Status(Enum):
    OK = "ok"
    USAGE = "usage"
    UNKNOWN_SUBCOMMAND = "unknown_subcommand"
    NO_PERMISSION = "no_permission"
    PLAYERS_ONLY = "players_only"
    UNKNOWN_CATEGORY = "unknown_category"
    NO_SUCH_RANK = "no_such_rank"
    PLAYER_NOT_FOUND = "player_not_found"


@dataclass
class Outcome:
    """Result of one command: status, lines for the actor, and the rank when one was read."""

    status: Status
    lines: List[str] = field(default_factory=list)
    rank: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class CommandDispatcher:
    """
    Maps /premium arguments onto RankStore calls.

    Stateless apart from the references it is handed: the store, and the
    host's directory of online players (needed only for `get <player> ...`).
    """

    def __init__(self, store, players: Optional[PlayerDirectory] = None,
                 label: str = DEFAULT_LABEL):
        self.store = store
        self.players = players
        self.label = label
        self._handlers = {
            "create": self._create,
            "upgrade": self._upgrade,
            "get": self._get,
        }

    def dispatch(self, actor: Actor, args: Sequence[str], label: Optional[str] = None) -> Outcome:
        label = label or self.label
        args = list(args)
        if not args:
            return self.usage(actor, label)

        sub = args[0].lower()
        handler = self._handlers.get(sub)
        if handler is None:
            usage = self.usage(actor, label)
            return Outcome(Status.UNKNOWN_SUBCOMMAND, [f"Unknown subcommand: {sub}"] + usage.lines)

        logger.debug("%s ran /%s %s", actor.name, label, " ".join(args))
        return handler(actor, args, label)

    def usage(self, actor: Actor, label: Optional[str] = None) -> Outcome:
        """Usage block listing only what the actor may run."""
        label = label or self.label
        lines = ["Premium commands:"]
        if actor.has_permission(PERM_CREATE):
            lines.append(f"  /{label} create <rankType>")
        if actor.has_permission(PERM_UPGRADE):
            lines.append(f"  /{label} upgrade <rankType>")
        if actor.has_permission(PERM_GET_SELF):
            lines.append(f"  /{label} get <rankType>")
        if actor.has_permission(PERM_GET_OTHERS):
            lines.append(f"  /{label} get <playerOnline> <rankType>")
        return Outcome(Status.USAGE, lines)

    # ── Subcommands ───────────────────────────────────────────

    def _create(self, actor, args, label):
        if not actor.has_permission(PERM_CREATE):
            return _no_permission(PERM_CREATE)
        if len(args) != 2:
            return _usage_line(f"/{label} create <rankType>")

        category = args[1]
        self.store.create_table(category)
        return Outcome(Status.OK, [f"Premium rank table ensured for type: {category}"])

    def _upgrade(self, actor, args, label):
        if not actor.has_permission(PERM_UPGRADE):
            return _no_permission(PERM_UPGRADE)
        if actor.player_id is None:
            return Outcome(Status.PLAYERS_ONLY, [f"Only players can run: /{label} upgrade <rankType>"])
        if len(args) != 2:
            return _usage_line(f"/{label} upgrade <rankType>")

        category = args[1]
        if not self.store.rank_table_exists(category):
            return Outcome(Status.UNKNOWN_CATEGORY, ["This rank type doesn't exist."])

        rank = self.store.upgrade_and_get(actor.player_id, category)
        logger.info("%s upgraded %s rank to %s", actor.name, category, rank)
        return Outcome(Status.OK, [f"Your {category} rank is now: {rank}"], rank=rank)

    def _get(self, actor, args, label):
        if len(args) == 2:
            return self._get_self(actor, args[1], label)
        if len(args) == 3:
            return self._get_other(actor, args[1], args[2])
        return Outcome(Status.USAGE, [
            "Usage:",
            f"  /{label} get <rankType>",
            f"  /{label} get <playerOnline> <rankType>",
        ])

    def _get_self(self, actor, category, label):
        if not actor.has_permission(PERM_GET_SELF):
            return _no_permission(PERM_GET_SELF)
        if actor.player_id is None:
            return Outcome(Status.PLAYERS_ONLY, [f"Only players can run: /{label} get <rankType>"])

        rank = self._lookup(actor.player_id, category)
        if rank is None:
            return _no_rank()
        return Outcome(Status.OK, [f"Your {category} rank: {rank}"], rank=rank)

    def _get_other(self, actor, player_name, category):
        if not actor.has_permission(PERM_GET_OTHERS):
            return _no_permission(PERM_GET_OTHERS)

        target = self.players.find_online(player_name) if self.players else None
        if target is None or target.player_id is None:
            return Outcome(Status.PLAYER_NOT_FOUND, [f"Player not found or not online: {player_name}"])

        rank = self._lookup(target.player_id, category)
        if rank is None:
            return _no_rank()
        return Outcome(Status.OK, [f"{target.name}'s {category} rank: {rank}"], rank=rank)

    def _lookup(self, player_id, category):
        """Rank for the player, or None for a missing table or a missing row alike."""
        if not self.store.rank_table_exists(category):
            return None
        rank = self.store.get_rank(player_id, category)
        return rank if rank >= 0 else None


def _no_permission(node):
    return Outcome(Status.NO_PERMISSION, [f"You don't have permission: {node}"])


def _usage_line(usage):
    return Outcome(Status.USAGE, [f"Usage: {usage}"])


def _no_rank():
    return Outcome(Status.NO_SUCH_RANK, ["You don't have this rank."])
