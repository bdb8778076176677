"""Client helpers for the published blog-data.json.

Every helper fetches the file fresh. Failures never propagate: they are
logged and turned into an empty result (or None for a single post).
``fetch_blog_posts`` keeps the failure visible for callers that need it.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from blogdata.config import get_settings
from blogdata.models.blog import BlogFetchResult, BlogPost
from blogdata.services.formatting import date_sort_key
from blogdata.services.http_client import get_shared_client

logger = logging.getLogger(__name__)

_posts_adapter = TypeAdapter(list[BlogPost])


def sort_posts_by_date(posts: list[BlogPost]) -> list[BlogPost]:
    """Return posts newest first.

    Posts whose date cannot be parsed go after all dated posts, in their
    original relative order.
    """
    dated: list[tuple[float, BlogPost]] = []
    undated: list[BlogPost] = []
    for post in posts:
        key = date_sort_key(post.date)
        if key is None:
            undated.append(post)
        else:
            dated.append((key, post))
    dated.sort(key=lambda item: item[0], reverse=True)
    return [post for _, post in dated] + undated


async def fetch_blog_posts() -> BlogFetchResult:
    """Fetch and parse blog-data.json, sorted by date descending."""
    url = get_settings().blog_data_url
    client = get_shared_client()
    try:
        resp = await client.get(url)
        if not resp.is_success:
            logger.warning(
                "No blog posts found yet (HTTP %d from %s)", resp.status_code, url
            )
            return BlogFetchResult.failure(f"HTTP {resp.status_code}")
        posts = _posts_adapter.validate_python(resp.json())
    except ValidationError as exc:
        logger.error("Malformed blog data from %s: %s", url, exc)
        return BlogFetchResult.failure("malformed blog data")
    except Exception as exc:
        logger.exception("Error fetching blog posts from %s", url)
        return BlogFetchResult.failure(str(exc) or type(exc).__name__)
    return BlogFetchResult(posts=sort_posts_by_date(posts))


async def get_blog_posts() -> list[BlogPost]:
    """All posts, newest first; empty if the fetch failed."""
    result = await fetch_blog_posts()
    return result.posts


async def get_blog_post(slug: str) -> BlogPost | None:
    """The first post (in date order) with this exact slug, or None."""
    try:
        posts = await get_blog_posts()
        return next((p for p in posts if p.slug == slug), None)
    except Exception:
        logger.exception("Error fetching blog post %s", slug)
        return None


def _matches(post: BlogPost, keyword: str) -> bool:
    if keyword in post.title.lower():
        return True
    if post.excerpt and keyword in post.excerpt.lower():
        return True
    return keyword in post.body.lower()


async def search_blog_posts(keyword: str) -> list[BlogPost]:
    """Posts whose title, excerpt or body contains ``keyword`` (any case)."""
    try:
        posts = await get_blog_posts()
        needle = keyword.lower()
        return [p for p in posts if _matches(p, needle)]
    except Exception:
        logger.exception("Error searching posts for %r", keyword)
        return []
