"""Pydantic models shared across the export pipeline."""

from typing import Optional, List
from pydantic import BaseModel, Field


class Node(BaseModel):
    """A layer in the Figma document tree."""

    node_id: str = Field(..., alias="id")
    name: Optional[str] = None

    class Config:
        populate_by_name = True
        frozen = True


class ExportResult(BaseModel):
    """Outcome of one export run."""

    output_dir: str
    saved: List[str] = []
    skipped: List[str] = []  # node IDs with no file written

    @property
    def saved_count(self) -> int:
        return len(self.saved)
