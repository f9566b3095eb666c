"""In-memory model of an extracted API: packages, declarations and members."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from apidoc_html.doc_nodes import DocComment


class ApiItemKind(str, Enum):
    """Discriminant for every item in the API tree."""

    MODEL = "Model"
    PACKAGE = "Package"
    ENTRY_POINT = "EntryPoint"
    NAMESPACE = "Namespace"
    CLASS = "Class"
    INTERFACE = "Interface"
    ENUM = "Enum"
    ENUM_MEMBER = "EnumMember"
    CONSTRUCTOR = "Constructor"
    CONSTRUCT_SIGNATURE = "ConstructSignature"
    METHOD = "Method"
    METHOD_SIGNATURE = "MethodSignature"
    FUNCTION = "Function"
    PROPERTY = "Property"
    PROPERTY_SIGNATURE = "PropertySignature"
    TYPE_ALIAS = "TypeAlias"
    VARIABLE = "Variable"


class ReleaseTag(str, Enum):
    """Release stage declared on an item."""

    NONE = "None"
    INTERNAL = "Internal"
    ALPHA = "Alpha"
    BETA = "Beta"
    PUBLIC = "Public"


PARAMETERIZED_KINDS = frozenset(
    {
        ApiItemKind.CONSTRUCTOR,
        ApiItemKind.CONSTRUCT_SIGNATURE,
        ApiItemKind.METHOD,
        ApiItemKind.METHOD_SIGNATURE,
        ApiItemKind.FUNCTION,
    },
)


CONTAINER_LEVELS = (ApiItemKind.MODEL, ApiItemKind.PACKAGE, ApiItemKind.ENTRY_POINT)

KIND_VALUES = frozenset(k.value for k in ApiItemKind)


@dataclass
class ApiParameter:
    """One declared parameter of a function-like item."""

    name: str
    type_text: str = ""


@dataclass(eq=False)
class ApiItem:
    """A node of the API tree.

    Only the attributes relevant to ``kind`` are meaningful; the rest keep
    their defaults.
    """

    kind: ApiItemKind | str
    display_name: str
    members: list[ApiItem] = field(default_factory=list)
    parent: ApiItem | None = field(default=None, repr=False)
    doc_comment: DocComment | None = None
    excerpt: str = ""
    modifiers: list[str] = field(default_factory=list)
    release_tag: ReleaseTag | None = None
    parameters: list[ApiParameter] = field(default_factory=list)
    overload_index: int = 1
    is_static: bool = False
    is_event_property: bool = False
    property_type: str = ""
    initializer: str = ""

    def __post_init__(self) -> None:
        """Normalize the kind and link initial members back to this item."""
        # Unknown kinds stay as strings; the page generator rejects them.
        if not isinstance(self.kind, ApiItemKind) and self.kind in KIND_VALUES:
            self.kind = ApiItemKind(self.kind)
        for member in self.members:
            member.parent = self

    def add_member(self, member: ApiItem) -> ApiItem:
        """Attach ``member`` as the last child and return it."""
        member.parent = self
        self.members.append(member)
        return member

    @property
    def is_parameterized(self) -> bool:
        """True for constructors, methods, functions and their signatures."""
        return self.kind in PARAMETERIZED_KINDS

    @property
    def entry_points(self) -> list[ApiItem]:
        """Entry point members of a package."""
        return [m for m in self.members if m.kind == ApiItemKind.ENTRY_POINT]

    def get_hierarchy(self) -> list[ApiItem]:
        """Return the chain of items from the root down to this one."""
        chain: list[ApiItem] = []
        current: ApiItem | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain[::-1]

    def get_scoped_name_within_package(self) -> str:
        """Return the dotted name below the entry point, e.g. ``Widget.doThing``."""
        if self.kind in CONTAINER_LEVELS:
            return self.display_name
        names: list[str] = []
        for item in self.get_hierarchy():
            if item.kind in CONTAINER_LEVELS:
                names = []
            else:
                names.append(item.display_name)
        return ".".join(names)

    def get_excerpt_with_modifiers(self) -> str:
        """Return the declaration excerpt prefixed with its modifiers."""
        return " ".join([*self.modifiers, self.excerpt.strip()]).strip()
