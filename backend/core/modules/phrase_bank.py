"""
Theme-tagged phrase bank for bedtime stories.

Each theme supplies the narrative beats a template slot can drop in:
- place: where the story's trouble happens
- problem: the conflict sentence
- turn: the moment the theme comes into play
- resolution: how the trouble is put right
- lesson: the moral, said out loud at bedtime

Phrases are themselves format strings over the base substitution variables
(child_name, animal, Animal, the_animal, The_animal).
"""

from types import MappingProxyType

from ..vocabulary import Theme

PHRASE_KEYS = ("place", "problem", "turn", "resolution", "lesson")

_PHRASES: dict[Theme, dict[str, str]] = {

    Theme.KINDNESS: {
        "place": "the edge of the whispering meadow",
        "problem": "a little hedgehog sat alone, shivering, because the wind had scattered all the leaves from its bed",
        "turn": "{child_name} knelt down and said, \"We can't walk past someone who needs help.\" {The_animal} nodded and began gathering the softest leaves in the meadow",
        "resolution": "Together they built the hedgehog a new bed, so warm and round that it smiled for the first time all day",
        "lesson": "a kind heart makes the whole world a little warmer",
    },

    Theme.FRIENDSHIP: {
        "place": "the tall grass beside the sparkling river",
        "problem": "{the_animal} and a shy little duck both wanted to play, but neither one knew how to say hello",
        "turn": "{child_name} took a deep breath and introduced everyone, and soon {the_animal} was showing the duck a secret stepping-stone path",
        "resolution": "By sunset the three of them were laughing so hard that the fireflies came out to see what the fun was about",
        "lesson": "a friend is someone who makes room for you in the game",
    },

    Theme.COURAGE: {
        "place": "the old bridge at the bottom of the dark forest",
        "problem": "the path home crossed a wobbly bridge, and {the_animal} felt its paws tremble just looking at it",
        "turn": "{child_name} held out a hand and said, \"Being brave doesn't mean you aren't scared. It means you try anyway.\" {The_animal} took one careful step, and then another",
        "resolution": "On the other side they found the moon waiting for them, round and bright, as if it had been cheering all along",
        "lesson": "courage is taking the next small step even when your knees wobble",
    },

    Theme.SHARING: {
        "place": "the picnic spot under the big apple tree",
        "problem": "{the_animal} had found the very last basket of sweet berries, and three hungry squirrels were watching with hopeful eyes",
        "turn": "{child_name} whispered, \"Berries taste better when everyone gets some.\" {The_animal} thought about it and slowly opened the basket",
        "resolution": "Everyone had a handful, and the squirrels shared their acorns too, so the picnic became a feast",
        "lesson": "when we share what we have, there is always more to go around",
    },

    Theme.HONESTY: {
        "place": "the garden where the prize pumpkin grew",
        "problem": "{the_animal} bumped the garden gate and cracked the prize pumpkin, and nobody had seen it happen",
        "turn": "{child_name} said softly, \"The truth can feel heavy, but it gets lighter once you say it.\" {The_animal} went straight to the old gardener to explain",
        "resolution": "The gardener smiled, thanked them for telling the truth, and showed them how to plant new pumpkin seeds for next year",
        "lesson": "telling the truth is always the bravest way home",
    },

    Theme.PATIENCE: {
        "place": "the hilltop where the stars come out first",
        "problem": "{the_animal} wanted to see the shooting stars right away and grew grumpy when the sky stayed plain and dark",
        "turn": "{child_name} spread out a blanket and said, \"Some of the best things are worth waiting for.\" {The_animal} lay down and counted slow, quiet breaths",
        "resolution": "At last a silver star streaked across the sky, then another, and another, until the whole night was sparkling",
        "lesson": "good things come to those who wait with a calm heart",
    },

    Theme.RESPONSIBILITY: {
        "place": "the little pond where the baby fish lived",
        "problem": "{the_animal} had promised to keep the pond clean, but playing all afternoon had left it full of twigs and leaves",
        "turn": "{child_name} said, \"A promise is a promise, even when it's not much fun.\" {The_animal} rolled up its sleeves, and they set to work",
        "resolution": "When the water shone clear again, the baby fish leapt and splashed as if they were saying thank you",
        "lesson": "keeping our promises helps everyone we care about",
    },
}

PHRASE_BANK = MappingProxyType({
    theme: MappingProxyType(phrases) for theme, phrases in _PHRASES.items()
})


def phrases_for(theme: Theme) -> MappingProxyType:
    """Return the phrase set for a theme. KeyError if the theme has none."""
    return PHRASE_BANK[theme]
