# load_data.py
"""
Seed the documents table from data/documents.csv
(or the three default documents when the file is missing).
"""

from scripts.seed import FILE_PATH, load_into_db, read_documents


def main():
    documents, stats = read_documents(FILE_PATH)
    written = load_into_db(documents)

    print("Load complete.")
    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Documents parsed:      {stats['n_documents']}")
    print(f"Rows with errors:      {stats['n_errors']}")
    print(f"Documents written:     {written}")


if __name__ == "__main__":
    main()
