"""Graph construction entrypoints: fetch both collections, then run the pipeline."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .config import Settings
from .graph_orchestrator import GraphOrchestrator
from .phases import AssemblyPhase, EdgeResolverPhase, HierarchyPhase, NodeBuilderPhase
from .pipeline import PipelinePhase, PipelineRunner

logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    async def fetch_collection(self, collection: str) -> List[Dict[str, Any]]:
        ...


def build_default_phases(settings: Settings) -> List[PipelinePhase]:
    return [
        NodeBuilderPhase(placeholder_name=settings.placeholder_name),
        HierarchyPhase(),
        EdgeResolverPhase(),
        AssemblyPhase(page_url=settings.notion_page_url, source_label=settings.source_label),
    ]


def build_graph_from_records(
    circle_records: Sequence[Dict[str, Any]],
    person_records: Sequence[Dict[str, Any]],
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    settings = settings or Settings()
    initial_context: Dict[str, Any] = {
        "circle_records": list(circle_records),
        "person_records": list(person_records),
        "orchestrator": GraphOrchestrator(),
    }
    runner = PipelineRunner(phases=build_default_phases(settings))
    final_context = runner.run(initial_context)
    return final_context["graph"]


async def fetch_all(source: RecordSource, collections: Sequence[str]) -> List[List[Dict[str, Any]]]:
    """Fetch ``collections`` concurrently; the first failure cancels the rest."""
    tasks = [asyncio.ensure_future(source.fetch_collection(name)) for name in collections]
    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.wait(pending)

    errors = [task.exception() for task in tasks if not task.cancelled()]
    for error in errors:
        if error is not None:
            raise error
    return [task.result() for task in tasks]


async def build_graph(source: RecordSource, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Fetch circles and people concurrently and build the graph.

    A failed fetch propagates ``SourceUnavailable`` unchanged and no graph is
    built. The other fetch is cancelled before the error is raised.
    """
    circle_records, person_records = await fetch_all(source, ("circles", "people"))
    logger.info("Fetched %d circle and %d person records", len(circle_records), len(person_records))
    return build_graph_from_records(circle_records, person_records, settings)
