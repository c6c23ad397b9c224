"""
Centralized domain types for the Bedtime Story Generator.

All dataclasses that are used across multiple modules are defined here
to make data flow explicit and avoid circular imports. Every type is frozen:
a story is produced once per request and never mutated afterward.
"""

from dataclasses import dataclass
from string import Formatter
from typing import Any, Optional

from backend.config import PARAGRAPH_DELIMITER

from .vocabulary import Animal, Theme


# =============================================================================
# Character Types
# =============================================================================


@dataclass(frozen=True)
class CharacterAppearance:
    """How a custom character looks."""

    eyes: str = ""
    size: str = ""
    pattern: str = ""


@dataclass(frozen=True)
class CharacterCustomization:
    """Optional enrichment from a character built on the creation screen."""

    color: str = ""
    personality: str = ""
    special_ability: str = ""
    accessories: tuple[str, ...] = ()
    appearance: Optional[CharacterAppearance] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CharacterCustomization":
        """Build from the API's camelCase customization payload."""
        appearance = data.get("appearance")
        return cls(
            color=data.get("color") or "",
            personality=data.get("personality") or "",
            special_ability=data.get("specialAbility") or data.get("special_ability") or "",
            accessories=tuple(data.get("accessories") or ()),
            appearance=CharacterAppearance(
                eyes=appearance.get("eyes") or "",
                size=appearance.get("size") or "",
                pattern=appearance.get("pattern") or "",
            ) if appearance else None,
        )


# =============================================================================
# Generation Input
# =============================================================================


@dataclass(frozen=True)
class GenerationInput:
    """Validated form data for one story request."""

    child_name: str
    animal: Animal
    theme: Theme
    character: Optional[CharacterCustomization] = None


# =============================================================================
# Template Types
# =============================================================================


@dataclass(frozen=True)
class Slot:
    """One paragraph-sized template unit in a fixed narrative position."""

    name: str  # introduction, rising_action, turn, resolution, ...
    text: str  # str.format template over the substitution variables

    @property
    def placeholders(self) -> frozenset[str]:
        """Names of the substitution variables this slot references."""
        return frozenset(
            field_name
            for _, field_name, _, _ in Formatter().parse(self.text)
            if field_name
        )


@dataclass(frozen=True)
class StoryTemplate:
    """An ordered sequence of slots registered for a theme."""

    template_id: str
    theme: Theme
    slots: tuple[Slot, ...]

    @property
    def slot_count(self) -> int:
        return len(self.slots)


# =============================================================================
# Output Types
# =============================================================================


@dataclass(frozen=True)
class StoryImage:
    """An illustration anchored after a paragraph.

    As an input descriptor, ``position`` may be None, meaning "place it
    wherever it fits"; anchored images always carry a position.
    """

    src: str
    alt: str
    position: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"src": self.src, "alt": self.alt, "position": self.position}


@dataclass(frozen=True)
class StoryMetadata:
    """Derived values computed from finished story content."""

    word_count: int
    reading_time: int  # minutes
    images: tuple[StoryImage, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "wordCount": self.word_count,
            "readingTime": self.reading_time,
            "images": [image.to_dict() for image in self.images],
        }


@dataclass(frozen=True)
class GeneratedStory:
    """Story text plus metadata. Identity is assigned by storage, not here."""

    content: str
    metadata: StoryMetadata
    template_id: str = ""

    @property
    def paragraphs(self) -> list[str]:
        """Content split the way the display splits it."""
        return self.content.split(PARAGRAPH_DELIMITER)

    @property
    def paragraph_count(self) -> int:
        return len(self.paragraphs)

    def to_dict(self) -> dict[str, Any]:
        """The wire shape handed to the storage collaborator."""
        return {"content": self.content, "metadata": self.metadata.to_dict()}

    def to_formatted_string(self, title: str) -> str:
        """Format the story as markdown for display/output."""
        images_by_position = {}
        for image in self.metadata.images:
            images_by_position.setdefault(image.position, image)

        lines = [f"# {title}", ""]
        for index, paragraph in enumerate(self.paragraphs):
            lines.append(paragraph)
            lines.append("")
            image = images_by_position.get(index)
            if image:
                lines.append(f"![{image.alt}]({image.src})")
                lines.append("")

        lines.append("*The End*")
        lines.append("")
        lines.append("---")
        lines.append(f"Word count: {self.metadata.word_count}")
        lines.append(f"Reading time: {self.metadata.reading_time} min")
        return "\n".join(lines)
