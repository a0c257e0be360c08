"""Light/dark theme preference and its per-browser persistence."""

from collections.abc import Callable, MutableMapping
from typing import Any, Protocol

DARK_MODE_KEY = "darkMode"


class ThemeRepository(Protocol):
    """Where the dark-mode preference is stored."""

    def load(self) -> bool | None: ...

    def save(self, dark: bool) -> None: ...


class StorageThemeRepository:
    """Theme preference kept in a mapping.

    In the app the mapping is NiceGUI's ``app.storage.user``, which follows
    the browser across reloads; tests pass a plain dict.
    """

    def __init__(self, storage: MutableMapping[str, Any], key: str = DARK_MODE_KEY) -> None:
        self._storage = storage
        self._key = key

    def load(self) -> bool | None:
        value = self._storage.get(self._key)
        return value if isinstance(value, bool) else None

    def save(self, dark: bool) -> None:
        self._storage[self._key] = bool(dark)


def resolve_initial_theme(saved: bool | None, os_prefers_dark: bool | None) -> bool:
    """Persisted preference first, then the OS color scheme, then light."""
    if saved is not None:
        return saved
    if os_prefers_dark is not None:
        return os_prefers_dark
    return False


class ThemeController:
    """Current theme for one page, persisted on every explicit change."""

    def __init__(
        self,
        repository: ThemeRepository,
        os_prefers_dark: bool | None = None,
        on_change: Callable[[bool], None] | None = None,
    ) -> None:
        self._repository = repository
        self._on_change = on_change
        self.dark = resolve_initial_theme(repository.load(), os_prefers_dark)

    def adopt_os_preference(self, prefers_dark: bool | None) -> None:
        """Follow the OS color scheme unless the user already chose a theme.

        The OS preference is only known once the browser has connected, so
        it arrives after construction.
        """
        dark = resolve_initial_theme(self._repository.load(), prefers_dark)
        if dark != self.dark:
            self.dark = dark
            self._notify()

    def toggle(self) -> bool:
        self.dark = not self.dark
        self._repository.save(self.dark)
        self._notify()
        return self.dark

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.dark)
