"""Blog post data models."""

from dataclasses import dataclass, field

from pydantic import BaseModel

DEFAULT_TITLE = "Untitled"


class BlogPost(BaseModel):
    """One post as written to blog-data.json.

    Field order is the key order of each serialized record.
    """

    slug: str
    title: str = DEFAULT_TITLE
    date: str = ""
    author: str = ""
    image: str = ""
    excerpt: str = ""
    category: str = ""
    body: str = ""


@dataclass
class BlogFetchResult:
    """Outcome of fetching the published collection.

    ``ok`` is False when the fetch or parse failed; ``posts`` is then empty,
    so callers that only read ``posts`` see the same thing as "no posts".
    """

    posts: list[BlogPost] = field(default_factory=list)
    ok: bool = True
    error: str | None = None

    @classmethod
    def failure(cls, error: str) -> "BlogFetchResult":
        return cls(posts=[], ok=False, error=error)
