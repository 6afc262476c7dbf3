"""
Registry Models
Typed views of the registry index JSON.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Entry:
    """One index record: a document's metadata without its content."""
    slug: str
    title: str
    category: str
    url: str = ""
    tags: Tuple[str, ...] = ()
    quality_score: Optional[float] = None
    featured: bool = False
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        return cls(
            slug=data.get("slug") or "",
            title=data.get("title") or "",
            category=data.get("category") or "",
            url=data.get("url") or "",
            tags=tuple(data.get("tags") or ()),
            quality_score=data.get("quality_score"),
            # Only a literal JSON true counts
            featured=data.get("featured") is True,
        )
    
    @property
    def quality(self) -> float:
        """Quality score for filtering; absent scores rank as 0."""
        return self.quality_score if self.quality_score is not None else 0
    
    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on title, slug, category or any tag."""
        term = term.lower()
        return (
            term in self.title.lower()
            or term in self.slug.lower()
            or term in self.category.lower()
            or any(term in tag.lower() for tag in self.tags)
        )


@dataclass(frozen=True)
class IndexDocument:
    """The registry index, fetched fresh for each tool call and never modified."""
    count: int
    categories: Tuple[str, ...] = ()
    entries: Tuple[Entry, ...] = ()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndexDocument":
        entries = tuple(Entry.from_dict(e) for e in data.get("entries") or [])
        count = data.get("count")
        return cls(
            count=count if count is not None else len(entries),
            categories=tuple(data.get("categories") or ()),
            entries=entries,
        )
    
    @property
    def featured(self) -> List[Entry]:
        return [e for e in self.entries if e.featured]
    
    def category_counts(self) -> Dict[str, int]:
        """
        Count entries per declared category.
        
        Keeps the declared order, collapses duplicate category names and
        ignores entries whose category was never declared, so the counts
        never add up to more than the index holds.
        """
        counts: Dict[str, int] = dict.fromkeys(self.categories, 0)
        for entry in self.entries:
            if entry.category in counts:
                counts[entry.category] += 1
        return counts
