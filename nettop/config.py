"""Runtime settings adjustable from the keyboard."""

from __future__ import annotations

from dataclasses import dataclass, replace

REFRESH_STEP_MS = 100
MIN_REFRESH_MS = 100
MAX_REFRESH_MS = 5000


@dataclass(frozen=True)
class Config:
    """Immutable view settings; every adjustment returns a new value."""
    refresh_ms: int = 500
    show_virtual: bool = False

    @property
    def interval_s(self) -> float:
        return self.refresh_ms / 1000.0

    def faster(self) -> Config:
        return replace(self, refresh_ms=max(MIN_REFRESH_MS, self.refresh_ms - REFRESH_STEP_MS))

    def slower(self) -> Config:
        return replace(self, refresh_ms=min(MAX_REFRESH_MS, self.refresh_ms + REFRESH_STEP_MS))

    def toggle_virtual(self) -> Config:
        return replace(self, show_virtual=not self.show_virtual)


_KEY_ACTIONS = {
    "+": Config.faster,
    "=": Config.faster,  # unshifted '+' on most layouts
    "-": Config.slower,
    "i": Config.toggle_virtual,
}


def apply_key(config: Config, key: str) -> Config:
    """Return the config produced by *key*, or *config* itself if the key is unbound."""
    action = _KEY_ACTIONS.get(key)
    if action is None:
        return config
    return action(config)
