"""Document ORM - notarized documents with traceability codes.

Invariants:
    - uid is unique; uid, token and hash are derived at insert when absent
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from beavernet.db.base import Base, TimestampMixin


class Document(TimestampMixin, Base):
    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    uid: Mapped[str | None] = mapped_column(String(100), unique=True)
    token: Mapped[str | None] = mapped_column(String(100))
    hash: Mapped[str | None] = mapped_column(String(128))
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Processed")
    author: Mapped[str] = mapped_column(Text, nullable=False)
    original_file_name: Mapped[str] = mapped_column(Text, nullable=False)
    original_pdf_data: Mapped[str | None] = mapped_column(Text)
