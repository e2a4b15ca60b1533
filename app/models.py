"""Article data model."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ParsedArticle:
    """One article parsed from a Markdown source file."""
    title: Optional[str]
    slug: Optional[str]
    publish_date: Optional[datetime]  # None when absent or unparseable
    image: Optional[str]
    content: str  # Rendered HTML
    source_path: str

    @property
    def timestamp(self) -> Optional[float]:
        """Publish date as POSIX seconds, or None for an invalid date."""
        if self.publish_date is None:
            return None
        return self.publish_date.timestamp()
