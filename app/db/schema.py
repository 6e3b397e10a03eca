# app/db/schema.py

from sqlalchemy import CheckConstraint, Column, Integer, MetaData, String, Table

NAME_MAX_LENGTH = 200

metadata = MetaData()

documents = Table(
    "documents",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False),
    CheckConstraint(
        f"length(name) BETWEEN 1 AND {NAME_MAX_LENGTH}",
        name="ck_documents_name_length",
    ),
)
