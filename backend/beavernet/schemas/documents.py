"""Document Schemas - notarized documents. uid/token/hash are server-derived."""

from typing import Literal

from beavernet.schemas.base import BaseSchema, NonEmptyStr, partial_model


class DocumentCreate(BaseSchema):
    title: NonEmptyStr
    uid: str | None = None
    token: str | None = None
    hash: str | None = None
    status: Literal["Processed", "Signed", "Draft"] = "Processed"
    author: NonEmptyStr
    original_file_name: NonEmptyStr
    original_pdf_data: str | None = None


DocumentUpdate = partial_model(DocumentCreate, "DocumentUpdate")
