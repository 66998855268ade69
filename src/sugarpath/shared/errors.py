"""Base exception shared by every sugarpath layer."""


class SugarPathError(Exception):
    """Root of the package's exception hierarchy."""


__all__ = ["SugarPathError"]
