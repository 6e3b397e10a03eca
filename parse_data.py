# parse_data.py
"""
Parse data/documents.csv and print basic stats without touching the database.
"""

from scripts.seed import parse_documents_csv, FILE_PATH


def main():
    documents, stats = parse_documents_csv(FILE_PATH)

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Documents parsed:      {stats['n_documents']}")
    print(f"Rows with errors:      {stats['n_errors']}")
    print(f"Duplicate ids:         {stats['n_duplicate_ids']}")

    if stats["error_examples"]:
        print("\nExample errors:")
        for ex in stats["error_examples"]:
            print(f"- Row {ex['row_number']}: {ex['error']}")


if __name__ == "__main__":
    main()
