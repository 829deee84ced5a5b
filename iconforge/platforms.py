"""Fixed table of target platforms and the icon sizes each one needs."""

from __future__ import annotations

from enum import Enum

from iconforge.errors import UnknownPlatform


class Platform(Enum):
    PHONE = ("phone", "Phone", "iPhone", (20, 40, 60, 29, 58, 87, 80, 120, 180, 76, 152, 167))
    TABLET = ("tablet", "Tablet", "iPad", (20, 40, 29, 58, 40, 80, 76, 152, 167, 83))
    DESKTOP = ("desktop", "Desktop", "macOS", (16, 32, 64, 128, 256, 512, 1024))
    WATCH = ("watch", "Watch", "watchOS", (48, 55, 58, 87, 80, 88, 172, 196, 216, 1024))
    TV = ("tv", "TV", "tvOS", (400, 800, 1200, 2400))
    AUTOMOTIVE = ("automotive", "Automotive head unit", "carOS", (200, 400, 800, 1600))

    def __init__(self, identifier: str, label: str, legacy_name: str, sizes: tuple[int, ...]) -> None:
        self.identifier = identifier
        self.label = label
        self.legacy_name = legacy_name
        self.sizes = sizes

    def __str__(self) -> str:
        return self.identifier

    @classmethod
    def identifiers(cls) -> list[str]:
        return [platform.identifier for platform in cls]

    @classmethod
    def lookup(cls, name: str) -> Platform:
        """Resolve a platform by identifier or legacy name, ignoring case."""
        wanted = name.strip().lower()
        for platform in cls:
            if wanted in (platform.identifier, platform.legacy_name.lower()):
                return platform
        raise UnknownPlatform(name)


def icon_filename(name: str, size: int) -> str:
    return f"Icon-{name}-{size}x{size}.png"


def format_sizes(sizes: tuple[int, ...]) -> list[str]:
    return [f"  - {size}x{size} pixels" for size in sizes]
