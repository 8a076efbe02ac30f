"""Demo of indexing and ranking driven by config.yml."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from config_loader import AppConfig, load_config
from errors import SearchServerError
from search_engine import SearchServer

LOGGER = logging.getLogger("search_server.demo")


def build_server(config: AppConfig) -> SearchServer:
    """Create a server and index every configured document."""
    server = SearchServer(config.stop_words, logger=LOGGER)
    for document in config.documents:
        try:
            server.add_document(document.id, document.text, document.status, document.ratings)
        except SearchServerError as exc:
            LOGGER.warning("Skipping document %d: %s", document.id, exc)
    LOGGER.info("Indexed %d documents", server.get_document_count())
    return server


def run_query(server: SearchServer, query: str) -> dict[str, object]:
    results = server.find_top_documents(query)
    matches = []
    for position in range(server.get_document_count()):
        document_id = server.get_document_id(position)
        words, status = server.match_document(query, document_id)
        matches.append({"document_id": document_id, "words": words, "status": str(status)})
    return {
        "query": query,
        "results": [document.to_dict() for document in results],
        "matches": matches,
    }


def run_demo(config_path: Path) -> None:
    config = load_config(config_path)
    server = build_server(config)

    for query in config.queries:
        try:
            payload = run_query(server, query)
        except SearchServerError as exc:
            LOGGER.warning("Query %r rejected: %s", query, exc)
            continue
        print(json.dumps(payload, ensure_ascii=False, indent=2))


def main() -> None:
    """Demo entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    base_dir = Path(__file__).resolve().parent
    run_demo(base_dir / "config.yml")


if __name__ == "__main__":
    main()
