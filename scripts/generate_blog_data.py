"""Generate blog-data.json from markdown posts.

Usage:
    python -m scripts.generate_blog_data
    python -m scripts.generate_blog_data --posts-dir _posts --output blog-data.json
"""

import argparse
import logging
import os
import sys

from blogdata.config import get_settings
from blogdata.services.generator import generate_blog_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Build blog-data.json from markdown posts"
    )
    parser.add_argument(
        "--posts-dir",
        default=settings.posts_dir,
        help=f"Directory of markdown posts (default: {settings.posts_dir})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=settings.output_file,
        help=f"JSON file to write (default: {settings.output_file})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        posts = generate_blog_data(
            args.posts_dir, args.output, get_settings().source_extension
        )
    except Exception as exc:
        print(f"Error generating blog data: {exc}", file=sys.stderr)
        return 1

    name = os.path.basename(args.output)
    print(f"✅ Generated {name} with {len(posts)} posts")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
