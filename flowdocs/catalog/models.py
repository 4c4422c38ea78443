"""
Catalog record types using Pydantic models.

Records are frozen; lookup tables built from them are exposed as read-only
mappings keyed by normalized name.
"""

from pydantic import BaseModel, ConfigDict


class CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PropSpec(CatalogModel):
    """A component prop or a type property."""

    name: str
    type: str
    description: str
    required: bool = False
    default: str | None = None


class ParamSpec(CatalogModel):
    """A hook or utility parameter."""

    name: str
    type: str
    description: str
    default: str | None = None


class MethodSpec(CatalogModel):
    """A method on an object returned by a hook."""

    name: str
    returns: str
    description: str


class ChangeVariant(CatalogModel):
    """One member of a change union, discriminated by its `type` field."""

    name: str
    description: str
    props: str


class EnumValue(CatalogModel):
    name: str
    value: str
    description: str | None = None


class ListingEntry(CatalogModel):
    """Short name/description pair used by category listings."""

    name: str
    description: str


class ComponentDoc(CatalogModel):
    name: str
    type: str
    description: str
    props: tuple[PropSpec, ...] = ()
    example: str | None = None


class HookDoc(CatalogModel):
    name: str
    type: str
    description: str
    parameters: tuple[ParamSpec, ...] = ()
    returns: str | None = None
    methods: tuple[MethodSpec, ...] = ()
    example: str | None = None


class TypeDoc(CatalogModel):
    name: str
    type: str
    description: str
    signature: str | None = None
    properties: tuple[PropSpec, ...] = ()
    variants: tuple[ChangeVariant, ...] = ()
    values: tuple[EnumValue, ...] = ()
    example: str | None = None


class UtilityDoc(CatalogModel):
    name: str
    type: str
    description: str
    signature: str | None = None
    parameters: tuple[ParamSpec, ...] = ()
    returns: str | None = None
    example: str | None = None


class ExampleDoc(CatalogModel):
    """A complete, runnable code example."""

    id: str
    name: str
    description: str
    tags: tuple[str, ...]
    code: str


class ExampleSummary(CatalogModel):
    """Search index entry; covers more examples than ship full code."""

    id: str
    name: str
    description: str
    tags: tuple[str, ...]

    @property
    def searchable_text(self) -> str:
        return " ".join([self.name, self.description, *self.tags]).lower()


class DocTopic(CatalogModel):
    title: str
    content: str


def prop(
    name: str,
    type_: str,
    description: str,
    *,
    required: bool = False,
    default: str | None = None,
) -> PropSpec:
    return PropSpec(
        name=name, type=type_, description=description, required=required, default=default
    )


def param(
    name: str, type_: str, description: str, *, default: str | None = None
) -> ParamSpec:
    return ParamSpec(name=name, type=type_, description=description, default=default)


def entry(name: str, description: str) -> ListingEntry:
    return ListingEntry(name=name, description=description)


def method(name: str, returns: str, description: str) -> MethodSpec:
    return MethodSpec(name=name, returns=returns, description=description)


def variant(name: str, description: str, props: str) -> ChangeVariant:
    return ChangeVariant(name=name, description=description, props=props)


def enum_value(name: str, value: str, description: str | None = None) -> EnumValue:
    return EnumValue(name=name, value=value, description=description)
