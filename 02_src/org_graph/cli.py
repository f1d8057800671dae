"""CLI entrypoint: build the graph artifact or serve it over HTTP."""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .config import Settings, load_settings
from .notion_client import NotionClient
from .service import build_graph, build_graph_from_records


def load_records(path: str) -> List[Dict[str, Any]]:
    """Read saved query results: a bare list of records or a ``{"results": [...]}`` payload."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("results", [])
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a list of records")
    return payload


async def _fetch_and_build(settings: Settings) -> Dict[str, Any]:
    async with NotionClient(settings) as client:
        return await build_graph(client, settings)


def run_build(
    settings: Settings,
    circles_json: str = "",
    people_json: str = "",
) -> Dict[str, Any]:
    if circles_json or people_json:
        circle_records = load_records(circles_json) if circles_json else []
        person_records = load_records(people_json) if people_json else []
        return build_graph_from_records(circle_records, person_records, settings)
    return asyncio.run(_fetch_and_build(settings))


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the organization graph from Notion.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Build the graph and save it as JSON.")
    build.add_argument(
        "--output-path",
        default="03_data/org_graph.json",
        help="Where to save the resulting graph JSON.",
    )
    build.add_argument(
        "--circles-json",
        default="",
        help="Optional saved circles query result; skips the live fetch.",
    )
    build.add_argument(
        "--people-json",
        default="",
        help="Optional saved people query result; skips the live fetch.",
    )

    serve = subparsers.add_parser("serve", help="Serve the graph API.")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=None, help="Defaults to $PORT or 3000.")
    return parser.parse_args(argv)


def serve(settings: Settings, host: str, port: int) -> None:
    import uvicorn

    from .api import create_app

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    logger = logging.getLogger(__name__)
    if not settings.notion_api_key:
        logger.warning("NOTION_API_KEY not set! Add it to the environment or .env.")
    logger.info("OrgMap API running on port %s", port)
    uvicorn.run(create_app(settings), host=host, port=port)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings()

    if args.command == "serve":
        serve(settings, host=args.host, port=args.port or settings.port)
        return 0

    graph = run_build(settings, circles_json=args.circles_json, people_json=args.people_json)
    output_path = Path(args.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(graph, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Graph saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"circles={graph['meta']['circleCount']}",
        f"people={graph['meta']['personCount']}",
        f"edges={graph['meta']['edgeCount']}",
    )
    return 0
