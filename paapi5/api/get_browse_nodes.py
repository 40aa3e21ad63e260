"""Parameters and response of the GetBrowseNodes operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from paapi5.api.language import Language
from paapi5.api.models import ApiError, BrowseNodesResult, Model
from paapi5.api.resource import Resource


@dataclass
class GetBrowseNodesResponse(Model):
    """Response returned by GetBrowseNodes."""

    errors: list[ApiError] = field(default_factory=list, metadata={"json": "Errors"})
    browse_nodes_result: BrowseNodesResult = field(
        default_factory=BrowseNodesResult, metadata={"json": "BrowseNodesResult"}
    )


@dataclass
class GetBrowseNodesParams:
    """Parameters accepted by GetBrowseNodes."""

    browse_node_ids: list[str] = field(default_factory=list)
    languages_of_preference: list[Language] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)

    def payload(self) -> dict[str, Any]:
        """Build the request body; at least one browse node id is required."""
        if not self.browse_node_ids:
            raise ValueError("One or more browse node ids required")
        body: dict[str, Any] = {"BrowseNodeIds": list(self.browse_node_ids)}
        if self.languages_of_preference:
            body["LanguagesOfPreference"] = list(self.languages_of_preference)
        if self.resources:
            body["Resources"] = list(self.resources)
        return body