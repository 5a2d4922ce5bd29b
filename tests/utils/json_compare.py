from typing import Dict, Iterable, Set

GENERATED_KEYS = {"id", "created_at", "updated_at", "joined_at", "expires_at"}


def exclude_keys(data: Dict, keys: Set[str] = GENERATED_KEYS) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}


def pluck(items: Iterable[Dict], key: str) -> list:
    return [item[key] for item in items]
