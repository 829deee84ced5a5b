"""Errors raised while resolving arguments, loading images and writing icons."""

from __future__ import annotations


class IconForgeError(Exception):
    pass


class InvalidArguments(IconForgeError):
    pass


class UnknownPlatform(IconForgeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown platform: {name!r}")
        self.name = name


class LoadError(IconForgeError):
    pass


class FormatError(IconForgeError):
    pass


class DirectoryError(IconForgeError):
    pass


class WriteError(IconForgeError):
    pass
