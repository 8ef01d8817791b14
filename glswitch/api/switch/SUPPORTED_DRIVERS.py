"""Driver names accepted by set-link."""

SUPPORTED_DRIVERS: frozenset[str] = frozenset({"nvidia"})
