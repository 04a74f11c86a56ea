"""
Catalog object metadata as returned by GET {catalog}/buckets/{id}/resources/{name}
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class KeyValueMetadata(BaseModel):
    """One generic-information / variable entry attached to a catalog object."""
    model_config = ConfigDict(extra="ignore")

    label: Optional[str] = None
    key: str
    value: Optional[str] = None


class CatalogObject(BaseModel):
    """Metadata record of a catalog resource. Unknown fields are dropped."""
    model_config = ConfigDict(extra="ignore")

    bucket_id: Optional[int] = None
    bucket_name: Optional[str] = None
    name: str
    kind: Optional[str] = None
    content_type: Optional[str] = None
    commit_message: Optional[str] = None
    commit_time: Optional[str] = None
    object_key_values: List[KeyValueMetadata] = Field(default_factory=list)
    links: Dict[str, Any] = Field(default_factory=dict)

    def get_metadata(self, key: str, label: Optional[str] = None) -> Optional[str]:
        """Return the value of the first key/value entry matching key (and label, when given)."""
        for entry in self.object_key_values:
            if entry.key == key and (label is None or entry.label == label):
                return entry.value
        return None
