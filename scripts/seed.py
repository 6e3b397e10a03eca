# scripts/seed.py

import asyncio
import csv
import logging
import os

from pydantic import ValidationError

from app.db.engine import dispose_engine, get_engine
from app.db.store import create_schema, insert_documents
from app.models.documents import DocumentIn

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

FILE_PATH = "data/documents.csv"

DEFAULT_DOCUMENTS = [
    DocumentIn(id=1, name="Document 1"),
    DocumentIn(id=2, name="Document 2"),
    DocumentIn(id=3, name="Document 3"),
]


# ---- Helpers ----

def parse_id(value):
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return int(value)


def parse_documents_csv(file_path: str = FILE_PATH):
    """
    Read documents from a CSV with columns Id (optional) and Name.

    Bad rows are counted and a few examples kept; they never abort the parse.
    Returns (documents, stats).
    """
    documents = []

    n_rows = 0
    n_errors = 0
    error_examples = []

    seen_ids: set[int] = set()
    duplicate_id_examples: list[str] = []
    duplicate_id_count = 0

    with open(file_path, newline="") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                doc = DocumentIn(
                    id=parse_id(row.get("Id")),
                    name=(row.get("Name") or "").strip(),
                )
            except (ValueError, ValidationError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )
                continue

            if doc.id is not None:
                if doc.id in seen_ids:
                    duplicate_id_count += 1
                    if len(duplicate_id_examples) < 5:
                        duplicate_id_examples.append(
                            f"Duplicate Id {doc.id} at CSV row {n_rows}"
                        )
                else:
                    seen_ids.add(doc.id)

            documents.append(doc)

    stats = {
        "n_rows": n_rows,
        "n_documents": len(documents),
        "n_errors": n_errors,
        "error_examples": error_examples,
        "n_duplicate_ids": duplicate_id_count,
        "duplicate_id_examples": duplicate_id_examples,
    }
    return documents, stats


def read_documents(file_path: str = FILE_PATH):
    if not os.path.exists(file_path):
        logger.info("%s not found, seeding default documents", file_path)
        stats = {
            "n_rows": 0,
            "n_documents": len(DEFAULT_DOCUMENTS),
            "n_errors": 0,
            "error_examples": [],
            "n_duplicate_ids": 0,
            "duplicate_id_examples": [],
        }
        return list(DEFAULT_DOCUMENTS), stats
    return parse_documents_csv(file_path)


async def _load(documents) -> int:
    engine = get_engine()
    try:
        await create_schema(engine)
        # duplicate ids upsert in file order; the last row wins
        return await insert_documents(engine, documents)
    finally:
        await dispose_engine()


def load_into_db(documents) -> int:
    return asyncio.run(_load(documents))


def log_stats(stats) -> None:
    logger.info(f"Total CSV rows read:   {stats['n_rows']}")
    logger.info(f"Documents parsed:      {stats['n_documents']}")
    logger.info(f"Rows with errors:      {stats['n_errors']}")
    logger.info("Duplicate ids: %s", stats["n_duplicate_ids"])
    for example in stats["duplicate_id_examples"]:
        logger.warning("Duplicate id example: %s", example)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


def main():
    documents, stats = read_documents(FILE_PATH)
    written = load_into_db(documents)

    log_stats(stats)
    logger.info("Documents written:     %s", written)


if __name__ == "__main__":
    main()
