"""Build blog-data.json from a directory of markdown posts.

Reads every ``*.md`` file in the posts directory, parses its front matter,
and writes the whole collection as one pretty-printed JSON array. The output
file is replaced atomically: a failed run leaves the previous file intact.
"""

import json
import logging
import os
import stat
import tempfile
from datetime import datetime, timezone

from blogdata.models.blog import DEFAULT_TITLE, BlogPost
from blogdata.services.front_matter import derive_slug, extract_front_matter

logger = logging.getLogger(__name__)


def _generated_at() -> str:
    """Current UTC time as ``2024-01-15T10:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_post(filename: str, content: str, extension: str = ".md") -> BlogPost:
    """Build one BlogPost from a file's name and text.

    Empty metadata values fall back to the same defaults as missing ones.
    """
    metadata, body = extract_front_matter(content)
    return BlogPost(
        slug=derive_slug(filename, extension),
        title=metadata.get("title") or DEFAULT_TITLE,
        date=metadata.get("date") or _generated_at(),
        author=metadata.get("author") or "",
        image=metadata.get("image") or "",
        excerpt=metadata.get("excerpt") or "",
        category=metadata.get("category") or "",
        body=body.strip(),
    )


def load_posts(posts_dir: str, extension: str = ".md") -> list[BlogPost]:
    """Read all post files in ``posts_dir`` in directory-listing order.

    Only regular files directly inside the directory are read.
    """
    posts: list[BlogPost] = []
    for filename in os.listdir(posts_dir):
        path = os.path.join(posts_dir, filename)
        if not filename.endswith(extension) or not os.path.isfile(path):
            continue
        # newline="" keeps CRLF bodies byte-for-byte
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
        posts.append(build_post(filename, content, extension))
    return posts


def serialize_posts(posts: list[BlogPost]) -> str:
    """Render posts as the JSON array stored in blog-data.json."""
    return json.dumps(
        [p.model_dump() for p in posts], indent=2, ensure_ascii=False
    )


def _file_mode(path: str) -> int:
    """Mode for the output: the existing file's, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: str, text: str) -> None:
    """Write ``text`` to ``path`` via a temp file in the same directory.

    The temp file is created 0600, so it gets the target's mode before the
    rename.
    """
    mode = _file_mode(path)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        dir=directory, prefix=".blog-data-", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def generate_blog_data(
    posts_dir: str, output_file: str, extension: str = ".md"
) -> list[BlogPost]:
    """Generate ``output_file`` from the posts in ``posts_dir``.

    Creates ``posts_dir`` if it does not exist. Any I/O error propagates
    and no output is written.

    Returns:
        The posts written, in file order.
    """
    if not os.path.isdir(posts_dir):
        os.makedirs(posts_dir, exist_ok=True)
        logger.info("Created posts directory %s", posts_dir)

    posts = load_posts(posts_dir, extension)
    write_atomic(output_file, serialize_posts(posts))
    logger.info("Wrote %d posts to %s", len(posts), output_file)
    return posts
