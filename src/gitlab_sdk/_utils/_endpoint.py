import re
from typing import Dict, List, Sequence
from urllib.parse import quote

from ..models.errors import MissingPathParameterError
from ._encoding import QueryItem

_PLACEHOLDER_PATTERN = re.compile(r"\{(.*?)\}")


class Endpoint(str):
    """A REST endpoint path which may contain ``{name}`` placeholders.

    Placeholders are filled from the query items produced by the options of a
    request; every item not consumed by a placeholder stays a query parameter.
    This is what allows a single option such as ``id`` to be a path variable
    for ``/projects/{id}`` and a query parameter for ``/projects``.

    Examples:
        ```python
        endpoint = Endpoint("/projects/{id}/repository/commits/{sha}")
        items = [("id", "42"), ("sha", "abc"), ("since", "2023-01-01")]
        endpoint.expand(items)                # '/projects/42/repository/commits/abc'
        endpoint.residual_query_items(items)  # [('since', '2023-01-01')]
        ```
    """

    @property
    def placeholders(self) -> List[str]:
        return _PLACEHOLDER_PATTERN.findall(self)

    def expand(self, query_items: Sequence[QueryItem]) -> str:
        """Substitute every placeholder with its percent-encoded value.

        Raises:
            MissingPathParameterError: If a placeholder has no matching item.
        """
        values: Dict[str, str] = {}
        for name, value in query_items:
            values.setdefault(name, value)

        def substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name not in values:
                raise MissingPathParameterError(str(self), name)
            return quote(values[name], safe="")

        return _PLACEHOLDER_PATTERN.sub(substitute, self)

    def residual_query_items(self, query_items: Sequence[QueryItem]) -> List[QueryItem]:
        used = set(self.placeholders)
        return [item for item in query_items if item[0] not in used]
