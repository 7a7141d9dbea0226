"""
Tab completion for /premium.

Only offers what the actor could actually run, and reads nothing but the
list of existing rank tables (plus the host's online player names).
`create <rankType>` is free-form and never suggested.
"""

from typing import List, Optional, Sequence

from .permissions import (
    PERM_CREATE,
    PERM_GET_OTHERS,
    PERM_GET_SELF,
    PERM_UPGRADE,
    Actor,
    PlayerDirectory,
)


class SuggestionProvider:
    def __init__(self, store, players: Optional[PlayerDirectory] = None):
        self.store = store
        self.players = players

    def suggest(self, actor: Actor, args: Sequence[str]) -> List[str]:
        """
        Candidates for the last (partial) token in args.

        args[0] → subcommands
        upgrade <_>          → rank types
        get <_>              → online players if the actor may query others,
                               else rank types
        get <player> <_>     → rank types
        """
        args = list(args) or [""]
        position = len(args) - 1
        token = args[-1]

        if position == 0:
            out = []
            if actor.has_permission(PERM_CREATE):
                out.append("create")
            if actor.has_permission(PERM_UPGRADE):
                out.append("upgrade")
            if actor.has_permission(PERM_GET_SELF) or actor.has_permission(PERM_GET_OTHERS):
                out.append("get")
            return _filter(out, token)

        sub = args[0].lower()

        if sub == "upgrade" and position == 1:
            if actor.has_permission(PERM_UPGRADE):
                return _filter(self.store.list_available_rank_types(), token)
            return []

        if sub == "get" and position == 1:
            if actor.has_permission(PERM_GET_OTHERS):
                names = self.players.online_names() if self.players else []
                return _filter(names, token)
            if actor.has_permission(PERM_GET_SELF):
                return _filter(self.store.list_available_rank_types(), token)
            return []

        if sub == "get" and position == 2 and actor.has_permission(PERM_GET_OTHERS):
            return _filter(self.store.list_available_rank_types(), token)

        return []


def _filter(candidates, token):
    if not token:
        return list(candidates)
    lower = token.lower()
    return [c for c in candidates if c.lower().startswith(lower)]
