import copy
import os
from dataclasses import dataclass
from enum import Enum
from itertools import chain
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..models.errors import UnsupportedOptionValueError
from ._encoding import QueryItem, encode_query_items


class OptionLocation(str, Enum):
    """Where the encoded value of an option is placed in the request."""

    QUERY = "query"
    JSON_BODY = "json_body"
    FORM_FILE = "form_file"


@dataclass(frozen=True)
class MultipartFile:
    """A file part of a multipart form. The transport reads the content."""

    path: str
    name: str = "file"


@dataclass(frozen=True)
class EncodedPayload:
    query_items: Tuple[QueryItem, ...] = ()
    json_body: Optional[Dict[str, Any]] = None
    multipart_form: Optional[Tuple[MultipartFile, ...]] = None


class Option:
    """A single named, typed and settable request parameter.

    An option with a ``None`` value is absent and contributes nothing to the
    encoded request.
    """

    __slots__ = ("key", "location", "value")

    def __init__(
        self,
        key: str,
        value: Any = None,
        location: OptionLocation = OptionLocation.QUERY,
    ) -> None:
        self.key = key
        self.location = location
        self.value = value

    @property
    def is_set(self) -> bool:
        return self.value is not None

    def query_items(self) -> List[QueryItem]:
        if self.location is not OptionLocation.QUERY:
            return []
        return encode_query_items(self.key, self.value)

    def json_fragment(self) -> Any:
        if self.location is not OptionLocation.JSON_BODY:
            return None
        return self.value

    def file_path(self) -> Optional[str]:
        if self.location is not OptionLocation.FORM_FILE or self.value is None:
            return None
        if not isinstance(self.value, (str, os.PathLike)):
            raise UnsupportedOptionValueError(self.key, self.value)
        return os.fspath(self.value)

    def __repr__(self) -> str:
        return f"Option(key={self.key!r}, value={self.value!r}, location={self.location.value})"


class OptionsCollection:
    """The options of one API call, encodable into a request payload.

    Declared options are registered explicitly with :meth:`declare`. A
    collection may embed a ``base`` collection whose declared options are
    encoded after its own, which lets a specialized set of options reuse a
    shared one. The pagination options ``per_page`` and ``page`` follow the
    declared ones, and ``custom_options`` are appended last, the base's after
    this collection's own. Every file option becomes a multipart part named
    ``file``.

    Examples:
        ```python
        options = OptionsCollection([Option("sha", "main")], per_page=50)
        options.declare("ids", [1, 2, 3])
        options.encode().query_items
        # (('ids[]', '1'), ('ids[]', '2'), ('ids[]', '3'),
        #  ('per_page', '50'), ('sha', 'main'))
        ```
    """

    def __init__(
        self,
        custom_options: Iterable[Optional[Option]] = (),
        *,
        base: Optional["OptionsCollection"] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> None:
        self._declared: List[Option] = []
        self._base = base
        self._per_page = Option("per_page", per_page)
        self._page = Option("page", page)
        self.custom_options: List[Option] = [
            option for option in custom_options if option is not None
        ]

    @property
    def page(self) -> Optional[int]:
        """Current page number."""
        return self._page.value

    @page.setter
    def page(self, value: Optional[int]) -> None:
        self._page.value = value

    @property
    def per_page(self) -> Optional[int]:
        """Results per page. The server uses 20 when not specified."""
        return self._per_page.value

    @per_page.setter
    def per_page(self, value: Optional[int]) -> None:
        self._per_page.value = value

    @property
    def base(self) -> Optional["OptionsCollection"]:
        return self._base

    def declare(
        self,
        key: str,
        value: Any = None,
        location: OptionLocation = OptionLocation.QUERY,
    ) -> Option:
        """Register a declared option and return it so callers can keep a handle."""
        option = Option(key, value, location)
        self._declared.append(option)
        return option

    def _declared_chain(self) -> Iterator[Option]:
        yield from self._declared
        if self._base is not None:
            yield from self._base._declared_chain()

    def _pagination_option(self, name: str) -> Option:
        option = getattr(self, f"_{name}")
        if option.is_set or self._base is None:
            return option
        return self._base._pagination_option(name)

    def _custom_chain(self) -> Iterator[Option]:
        yield from self.custom_options
        if self._base is not None:
            yield from self._base._custom_chain()

    def declared_options(self) -> List[Option]:
        """Declared options in encoding order: own, then base, then pagination.

        A pagination value left unset here is taken from the base.
        """
        return [
            *self._declared_chain(),
            self._pagination_option("per_page"),
            self._pagination_option("page"),
        ]

    def encode(self) -> EncodedPayload:
        query_items: List[QueryItem] = []
        json_body: Dict[str, Any] = {}
        files: List[MultipartFile] = []

        for option in chain(self.declared_options(), self._custom_chain()):
            if not option.is_set:
                continue
            if option.location is OptionLocation.QUERY:
                query_items.extend(option.query_items())
            elif option.location is OptionLocation.JSON_BODY:
                json_body[option.key] = option.json_fragment()
            elif option.location is OptionLocation.FORM_FILE:
                path = option.file_path()
                if path is not None:
                    files.append(MultipartFile(path=path))

        return EncodedPayload(
            query_items=tuple(query_items),
            json_body=json_body or None,
            multipart_form=tuple(files) or None,
        )

    def with_page(self, page: Optional[int]) -> "OptionsCollection":
        """Return a copy of this collection requesting ``page``."""
        clone = copy.deepcopy(self)
        clone.page = page
        return clone
