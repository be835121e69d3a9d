"""
Account hierarchy helpers.

Accounts form a forest through ``parent_id``. Flattening walks it depth-first
(parent before child, siblings by name) and yields a display path per account
such as ``"Assets > Bank > Checking"``. Every account is emitted exactly once,
including accounts whose parent chain never reaches a root.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any

PATH_SEPARATOR = " > "


@dataclass(frozen=True)
class FlatAccount:
    account: Any
    depth: int
    path: str


def _sort_key(account):
    return (account.name, str(account.id))


def flatten_account_tree(accounts):
    """
    Flatten accounts into depth-first order with their display paths.

    Args:
        accounts: Iterable of objects exposing ``id``, ``name`` and ``parent_id``

    Returns:
        list[FlatAccount]: One entry per account, deterministic for a given set
    """
    accounts = list(accounts)
    by_id = {account.id: account for account in accounts}

    roots = []
    children = defaultdict(list)
    for account in accounts:
        parent_id = account.parent_id
        if parent_id is None or parent_id == account.id or parent_id not in by_id:
            roots.append(account)
        else:
            children[parent_id].append(account)

    flattened = []
    visited = set()

    def walk(start):
        stack = [(start, 0, None)]
        while stack:
            account, depth, prefix = stack.pop()
            if account.id in visited:
                continue
            visited.add(account.id)

            path = account.name if prefix is None else f"{prefix}{PATH_SEPARATOR}{account.name}"
            flattened.append(FlatAccount(account=account, depth=depth, path=path))

            # Reversed so the alphabetically first sibling is popped first
            for child in sorted(children[account.id], key=_sort_key, reverse=True):
                stack.append((child, depth + 1, path))

    for root in sorted(roots, key=_sort_key):
        walk(root)

    # Accounts caught in a parent cycle are unreachable from any root
    for account in sorted(accounts, key=_sort_key):
        if account.id not in visited:
            walk(account)

    return flattened


def creates_cycle(account_id, new_parent_id, parent_of):
    """
    Tell whether making ``new_parent_id`` the parent of ``account_id`` forms a cycle.

    Args:
        account_id: Account being updated (None for a new account)
        new_parent_id: Proposed parent id
        parent_of: Mapping of account id -> current parent id

    Returns:
        bool: True if the proposed parent is the account itself or one of its
        descendants
    """
    if account_id is None or new_parent_id is None:
        return False

    seen = set()
    current = new_parent_id
    while current is not None and current not in seen:
        if current == account_id:
            return True
        seen.add(current)
        current = parent_of.get(current)
    return False
