# Template data
from .phrase_bank import PHRASE_BANK, phrases_for
from .story_templates import TEMPLATE_REGISTRY, templates_for, verify_registry

# Assembly and derived values
from .assembler import assemble, select_template
from .metadata import build_metadata, count_words, reading_time
from .image_anchors import anchor_images

__all__ = [
    # Template data
    "PHRASE_BANK",
    "phrases_for",
    "TEMPLATE_REGISTRY",
    "templates_for",
    "verify_registry",
    # Assembly and derived values
    "assemble",
    "select_template",
    "build_metadata",
    "count_words",
    "reading_time",
    "anchor_images",
]
