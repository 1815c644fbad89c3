from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import SiteContextError
from .generator import SiteContextGenerator
from .models import SiteContext


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    handler: Callable[[argparse.Namespace], int]


COMMANDS: dict[str, Command] = {}


def command(name: str, description: str) -> Callable:
    def register(func: Callable[[argparse.Namespace], int]) -> Callable[[argparse.Namespace], int]:
        if name in COMMANDS:
            raise ValueError(f"Command already registered: {name}")
        COMMANDS[name] = Command(name, description, func)
        return func

    return register


def load_context(args: argparse.Namespace) -> SiteContext:
    start = time.perf_counter()
    context = SiteContextGenerator().build_context(args.source)
    elapsed = time.perf_counter() - start
    print(f"Context built in {elapsed:.2f}s.", file=sys.stderr)
    return context


def context_summary(context: SiteContext) -> dict:
    return {
        "source": context.source_folder,
        "output": context.output_folder,
        "time": context.time.isoformat(),
        "permalink": context.config.permalink,
        "posts": [
            {
                "source": post.source,
                "title": post.title,
                "date": post.date.isoformat(),
                "url": post.url,
                "categories": list(post.categories),
                "tags": list(post.tags),
            }
            for post in context.posts
        ],
        "pages": [
            {
                "source": page.source,
                "kind": page.kind,
                "url": page.url,
                "siblings": [sibling.source for sibling in context.directory_pages(page)],
            }
            for page in context.pages
        ],
    }


@command("context", "Print a JSON summary of the site context.")
def context_command(args: argparse.Namespace) -> int:
    context = load_context(args)
    print(json.dumps(context_summary(context), indent=2, ensure_ascii=False))
    return 0


@command("posts", "List posts with their dates and URLs.")
def posts_command(args: argparse.Namespace) -> int:
    context = load_context(args)
    if not context.posts:
        print("No posts found.")
    for post in context.posts:
        print(f"{post.date:%Y-%m-%d}  {post.url}  ({post.source})")
    return 0


@command("pages", "List pages and pass-through files.")
def pages_command(args: argparse.Namespace) -> int:
    context = load_context(args)
    if not context.pages:
        print("No pages found.")
    for page in context.pages:
        print(f"{page.kind:<5} {page.url}  ({page.source})")
    return 0


@command("commands", "List available commands.")
def commands_command(args: argparse.Namespace) -> int:
    for name in sorted(COMMANDS):
        print(f"{name:<10} {COMMANDS[name].description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect the context of a static site source directory.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each build stage.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name in sorted(COMMANDS):
        info = COMMANDS[name]
        sub = subparsers.add_parser(name, help=info.description, description=info.description)
        sub.add_argument("source", nargs="?", default=".", help="Site source directory.")
        sub.set_defaults(handler=info.handler)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except SiteContextError as exc:
        print(str(exc), file=sys.stderr)
        return 1
