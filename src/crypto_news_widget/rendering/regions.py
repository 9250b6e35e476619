from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

Listener = Callable[[], None]


@dataclass
class Region:
    """An output area of the page: replaceable markup plus a class list."""

    name: str
    markup: str = ""
    classes: List[str] = field(default_factory=list)
    _listeners: Dict[str, List[Listener]] = field(default_factory=dict, repr=False)

    def replace(self, markup: str) -> None:
        self.markup = markup

    def toggle_class(self, name: str) -> bool:
        if name in self.classes:
            self.classes.remove(name)
            return False
        self.classes.append(name)
        return True

    def toggle_classes(self, names: Iterable[str]) -> None:
        for name in names:
            self.toggle_class(name)

    @property
    def class_attr(self) -> str:
        return " ".join(self.classes)

    def add_listener(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def dispatch(self, event: str) -> int:
        listeners = list(self._listeners.get(event, []))
        for listener in listeners:
            listener()
        return len(listeners)


@dataclass
class PageRegions:
    news: Region
    coins: Region
    menu_button: Optional[Region] = None
    nav: Optional[Region] = None

    @classmethod
    def default(cls, coins_fallback: str = "") -> "PageRegions":
        return cls(
            news=Region("news", classes=["grid", "md:grid-cols-3", "gap-6"]),
            coins=Region("coins", markup=coins_fallback, classes=["grid", "grid-cols-2", "md:grid-cols-4", "gap-6"]),
            menu_button=Region("menu_button", classes=["md:hidden"]),
            nav=Region("nav", classes=["hidden", "md:flex", "space-x-6"]),
        )
