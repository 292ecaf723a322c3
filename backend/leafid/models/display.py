"""Display records produced from free-text analysis, one per non-empty line."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class SectionHeader(BaseModel):
    kind: Literal["section_header"] = "section_header"
    title: str


class LabeledField(BaseModel):
    kind: Literal["labeled_field"] = "labeled_field"
    label: str
    value: str


class Bullet(BaseModel):
    kind: Literal["bullet"] = "bullet"
    text: str


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str


DisplayRecord = Annotated[
    Union[SectionHeader, LabeledField, Bullet, Paragraph],
    Field(discriminator="kind"),
]
