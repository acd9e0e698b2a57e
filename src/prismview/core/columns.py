"""Intra-line marking of a column range."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ColumnMarker:
    """Insert open/close sentinel tokens around a column range of a line.

    Columns are 1-based and inclusive. A ``column_end`` of ``0`` extends the
    range to the end of the line. Requests that fall outside the line leave
    the text unchanged.
    """

    marker_id: str

    @property
    def open_token(self) -> str:
        return f"OpEn{self.marker_id}"

    @property
    def close_token(self) -> str:
        return f"ClOsE{self.marker_id}"

    def mark_columns(self, text: str, column_start: int, column_end: int) -> str:
        length = len(text)
        if column_start <= 0 or column_end < 0:
            return text
        if column_start > length:
            return text
        if column_end != 0 and column_end < column_start:
            return text
        if column_end > length:
            return text

        end = length if column_end == 0 else column_end
        return (
            text[: column_start - 1]
            + self.open_token
            + text[column_start - 1 : end]
            + self.close_token
            + text[end:]
        )

    def replace_tokens(self, text: str, opening: str, closing: str) -> str:
        """Swap the sentinel tokens in ``text`` for the given markup."""
        return text.replace(self.open_token, opening).replace(self.close_token, closing)


__all__ = ["ColumnMarker"]
