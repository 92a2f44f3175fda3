# Where: tagtidy.shared.track_tags
# What: Normalized tag container handed from extraction to name building.
# Why: Tag values arrive as strings, lists or nothing; templating only sees this shape.

from dataclasses import dataclass, field


@dataclass(slots=True)
class TrackTags:
    """Tag fields relevant to file naming."""

    title: str | None = None
    artists: list[str] = field(default_factory=list)
    album: str | None = None
    track_number: int | None = None

    @property
    def artist(self) -> str:
        """All artists joined for display and templating."""
        return ", ".join(self.artists)


__all__ = ["TrackTags"]
