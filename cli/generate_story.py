#!/usr/bin/env python3
"""
CLI for generating bedtime stories.

Usage:
    python cli/generate_story.py Mia owl courage
    python cli/generate_story.py Leo lion kindness --output leo_story.md
    python cli/generate_story.py Ava fox sharing --seed 7 --stdout
    python cli/generate_story.py Sam bear honesty --json  # print the storage payload
"""

import argparse
import json
import re
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.core.errors import ValidationError  # noqa: E402
from backend.core.programs.story_generator import StoryGenerator  # noqa: E402
from backend.core.validation import parse_generation_input  # noqa: E402
from backend.core.vocabulary import Animal, Theme, values_of  # noqa: E402

OUTPUT_DIR = Path(__file__).parent.parent / "output"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a personalized bedtime story",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Animals: {', '.join(values_of(Animal))}
Themes:  {', '.join(values_of(Theme))}

Examples:
    python cli/generate_story.py Mia owl courage
    python cli/generate_story.py "Leo" lion kindness --seed 3 --stdout
        """,
    )

    parser.add_argument("child_name", type=str, help="The child's name (2-50 characters)")
    parser.add_argument("animal", type=str, help="Favorite animal")
    parser.add_argument("theme", type=str, help="Moral theme of the story")

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Pick a template variant at random with this seed (default: first template)",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file name (saved to output/ directory). Auto-generated if not specified.",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print to terminal instead of saving to file",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the {content, metadata} payload as JSON",
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        generation_input = parse_generation_input(args.child_name, args.animal, args.theme)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    story = StoryGenerator.from_seed(args.seed).generate(generation_input)

    if args.json:
        print(json.dumps(story.to_dict(), indent=2))
        return 0

    formatted = story.to_formatted_string(f"{generation_input.child_name}'s Magical Adventure")

    if args.stdout:
        print(formatted)
    else:
        OUTPUT_DIR.mkdir(exist_ok=True)

        if args.output:
            filename = args.output if args.output.endswith(".md") else f"{args.output}.md"
        else:
            # Auto-generate filename from name, theme and timestamp
            slug = re.sub(r"[^a-z0-9]+", "_", generation_input.child_name.lower()).strip("_") or "story"
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{slug}_{generation_input.theme.value}_{timestamp}.md"

        output_path = OUTPUT_DIR / filename
        output_path.write_text(formatted, encoding="utf-8")
        print(f"Story saved to: {output_path}")

    print(f"Word count: {story.metadata.word_count}", file=sys.stderr)
    print(f"Reading time: {story.metadata.reading_time} min", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
