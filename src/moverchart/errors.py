"""Exception types raised by moverchart."""


class InputError(ValueError):
    """The input document is malformed; `errors` lists every problem found."""

    def __init__(self, errors: list[str] | tuple[str, ...]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors))


class LayoutError(RuntimeError):
    """An internal layout invariant was violated."""


class AssetError(Exception):
    """An image could not be fetched or encoded."""
