from __future__ import annotations


class InvalidVersionError(ValueError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid version {text}")
