#!/usr/bin/env python3
"""
Submit a portfolio project to the publisher service, the way the admin form does.

Example:
    python scripts/submit_project.py \
        --server http://127.0.0.1:8000 \
        --title "Brand refresh" \
        --category "Web Design" \
        --description "Landing page redesign" \
        --tags "branding, web" \
        --alt "Home page" \
        shots/home.png shots/about.jpg
"""

from __future__ import annotations

import argparse
import base64
import json
import mimetypes
import sys
import urllib.error
import urllib.request
from datetime import date
from pathlib import Path
from typing import Any, Optional


def encode_data_uri(path: Path) -> str:
    if not path.is_file():
        raise SystemExit(f"image not found: {path}")
    mime = mimetypes.guess_type(path.name)[0] or "image/png"
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def build_payload(args: argparse.Namespace) -> dict[str, Any]:
    images: list[Path] = args.images
    alts: list[str] = args.alt or []
    if len(alts) == 1:
        # The form collects one alt text and repeats it for every image.
        alts = alts * len(images)
    if len(alts) != len(images):
        raise SystemExit(f"expected 1 or {len(images)} --alt values, got {len(alts)}")

    return {
        "title": args.title,
        "subtitle": args.subtitle,
        "category": args.category,
        "publishDate": args.publish_date,
        "description": args.description,
        "tags": args.tags,
        "imageNames": [path.name for path in images],
        "imgAlts": alts,
        "images": [encode_data_uri(path) for path in images],
    }


def http_post_json(url: str, payload: dict[str, Any], timeout: int = 120) -> tuple[int, bytes]:
    data = json.dumps(payload).encode("utf-8")
    req = urllib.request.Request(url, data=data, headers={"Content-Type": "application/json"}, method="POST")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.status, resp.read()
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read()


def submit(server: str, payload: dict[str, Any], api_prefix: str = "/api") -> dict[str, Any]:
    url = server.rstrip("/") + api_prefix + "/create-md"
    print(f"[api] submitting {len(payload['images'])} image(s) to {url}")
    status, body = http_post_json(url, payload)
    text = body.decode("utf-8", errors="ignore")
    if status != 200:
        raise SystemExit(f"submission failed: {status} {text}")
    return json.loads(text)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Publish a project to the portfolio repository")
    parser.add_argument("images", nargs="+", type=Path, help="Image files, in display order")
    parser.add_argument("--server", default="http://127.0.0.1:8000", help="Publisher service base URL")
    parser.add_argument("--api-prefix", default="/api", help="API prefix configured on the service")
    parser.add_argument("--title", required=True)
    parser.add_argument("--subtitle")
    parser.add_argument("--category", required=True)
    parser.add_argument("--description", required=True)
    parser.add_argument("--tags", default="", help="Comma separated tags")
    parser.add_argument(
        "--publish-date",
        default=date.today().isoformat(),
        help="Publication date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--alt",
        action="append",
        help="Alt text; give once for all images or once per image",
    )
    args = parser.parse_args(argv)
    if not args.alt:
        parser.error("at least one --alt is required")

    result = submit(args.server, build_payload(args), args.api_prefix)

    print("[done] published")
    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("aborted by user")
