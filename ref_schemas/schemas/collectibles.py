"""
Collectibles schemas.
"""
from typing import Any

from .base import AttributeField, CategorySchema, as_text, is_truthy, named_entity


class ArtSchema(CategorySchema):
    """Collectibles | Art"""

    SCHEMA_ORG_TYPE = "VisualArtwork"
    TRAITS = ("Priceable", "Conditional", "Valueable")
    CONDITION_OPTIONS = ("mint", "excellent", "good", "fair", "damaged", "needs_restoration")

    ATTRIBUTES = (
        AttributeField(key="artist", label="Artist", type="text", placeholder="Artist name", schema_org="artist", summary=True),
        AttributeField(key="title", label="Title", type="text", placeholder="Artwork title", schema_org="name", summary=True),
        AttributeField(
            key="medium",
            label="Medium",
            type="select",
            options=(
                "oil", "acrylic", "watercolor", "pastel", "charcoal", "ink",
                "mixed_media", "digital", "photography", "sculpture", "print", "other",
            ),
            schema_org="artMedium",
            summary=True,
        ),
        AttributeField(key="year_created", label="Year Created", type="number", placeholder="2023", schema_org="dateCreated"),
        AttributeField(key="dimensions", label="Dimensions", type="text", placeholder='24" x 36"'),
        AttributeField(key="edition_number", label="Edition", type="text", placeholder="3/50", schema_org="artEdition"),
        AttributeField(key="certificate_of_authenticity", label="Certificate of Authenticity", type="boolean"),
        AttributeField(key="framed", label="Framed", type="boolean"),
    )

    def build_schema_org(self, attrs: dict[str, Any]) -> dict[str, Any]:
        ld = self._base_record()
        if is_truthy(attrs.get("artist")):
            ld["artist"] = named_entity("Person", attrs["artist"])
        # name and dateCreated are overwritten by the ref's own name/createdAt when those are set
        if is_truthy(attrs.get("title")):
            ld["name"] = attrs["title"]
        if is_truthy(attrs.get("medium")):
            ld["artMedium"] = attrs["medium"]
        if is_truthy(attrs.get("year_created")):
            ld["dateCreated"] = as_text(attrs["year_created"])
        if is_truthy(attrs.get("edition_number")):
            ld["artEdition"] = attrs["edition_number"]
        return ld
