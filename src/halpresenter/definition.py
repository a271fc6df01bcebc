"""Per-presenter schema storage and inheritance.

Every presenter type owns one :class:`PresenterDefinition`. A subtype's
definition starts as a snapshot of its parent's, taken once when the
subtype is created; declarations made on the subtype afterwards shadow
same-named parent entries, and later changes to the parent are not seen
by the subtype.
"""

from typing import Optional

from halpresenter.domain import EmbedSpec, LetSpec, LinkSpec, PropertySpec

__all__ = ["PresenterDefinition"]


class PresenterDefinition:
    """The properties, links, embeds and lets declared for a presenter type.

    The four mappings are independent namespaces, each ordered by first
    declaration. Re-declaring a name replaces its spec but keeps its
    original position.

    Attributes:
        properties: Property specs keyed by output name.
        links: Link specs keyed by relation.
        embeds: Embed specs keyed by output name.
        lets: Virtual attribute specs keyed by attribute name.
    """

    def __init__(self):
        self.properties: dict[str, PropertySpec] = {}
        self.links: dict[str, LinkSpec] = {}
        self.embeds: dict[str, EmbedSpec] = {}
        self.lets: dict[str, LetSpec] = {}

    @classmethod
    def inherit_from(cls, parent: Optional["PresenterDefinition"]) -> "PresenterDefinition":
        """Create a definition seeded with a copy of the parent's mappings.

        Args:
            parent: The parent presenter's definition, or None for a root type.

        Returns:
            A new definition that the child's own declarations can extend.
        """
        definition = cls()
        if parent is not None:
            definition.properties.update(parent.properties)
            definition.links.update(parent.links)
            definition.embeds.update(parent.embeds)
            definition.lets.update(parent.lets)
        return definition

    def declare_property(self, name: str, spec: PropertySpec):
        self.properties[name] = spec

    def declare_link(self, rel: str, spec: LinkSpec):
        self.links[rel] = spec

    def declare_embed(self, name: str, spec: EmbedSpec):
        self.embeds[name] = spec

    def declare_let(self, name: str, spec: LetSpec):
        self.lets[name] = spec

    def __repr__(self):
        return (
            f"PresenterDefinition(properties={list(self.properties)}, "
            f"links={list(self.links)}, embeds={list(self.embeds)}, "
            f"lets={list(self.lets)})"
        )
