"""
Narration - every fixed line of player-facing text.

Each function returns a list of transcript lines. An empty string is a
blank line in the transcript.
"""

from __future__ import annotations

from gyeongbokgung.models.game import GameState
from gyeongbokgung.models.world import Item, Location

TITLE = "Secret of Gyeongbokgung Palace 🏯"

ITEM_EMOJI: dict[Item, str] = {
    Item.BINYEO: "💎",
    Item.SCROLL: "📜",
    Item.INCENSE: "🕯️",
}

INTRO = [
    "In the twilight of the Joseon Dynasty...",
    "You stand before the mighty Gyeongbokgung Palace. 🏯",
    "As a scholar seeking King Sejong's secret wisdom behind Hangul,",
    "you must uncover the hidden knowledge within these sacred walls.",
    "Type 'help' for available commands.",
]

HELP = [
    "Available commands:",
    "- look: examine your surroundings 👀",
    "- inventory: check your items 🧳",
    "- north/south/east/west: move in that direction 🧭",
    "- take binyeo/scroll/incense: pick up an item 🖐️",
    "- use binyeo/scroll/incense: use an item 🛠️",
    "- help: show this help message ℹ️",
    "",
    "Hint: You need the binyeo to enter the throne hall",
    "      and both the scroll and blessed temple to win!",
]

BANISHMENT = [
    "",
    "Palace guards discover your unauthorized presence in the sacred temple! 🚨",
    "Without the ancient scroll's knowledge and proper temple blessing,",
    "you are immediately recognized as an intruder.",
    "",
    "You have been banished from Gyeongbokgung Palace forever. 🚫",
    "The secret of Hangul remains undiscovered...",
]

VICTORY = [
    "",
    "The temple fills with a mystical light as ancient knowledge reveals itself! ✨",
    "",
    "You have discovered King Sejong's hidden wisdom behind the creation of Hangul,",
    "the phonetic system for reading and writing Korean language.",
    "His revolutionary alphabet was designed to be easy to learn,",
    "allowing common people to become literate and educated.",
    "",
    "Victory! You have uncovered one of Korea's greatest cultural achievements! 🏆",
]

SCROLL_LORE = [
    "You carefully unroll the ancient scroll. 📜",
    "The text speaks of blessing sacred places with the royal binyeo and temple incense.",
    "Only then will the secrets of Hangul be revealed.",
]

UNKNOWN_COMMAND = "I don't understand that command. Type 'help' for available commands."
NO_EXIT = "You cannot go that way. 🚫"
NOTHING_HAPPENS = "Nothing happens. 🚫"
NOT_TAKEABLE = "That's not something you can take. 🚫"
NOT_USABLE = "That's not something you can use. 🚫"
NOT_HELD = "You don't have that item. 🚫"

# Outcome of a successful offering, keyed by the sacred place blessed
BLESSED: dict[Location, str] = {
    Location.THRONE_HALL: "The throne hall resonates with the power of the binyeo! 💎",
    Location.TEMPLE: "The temple accepts your offering! 🕯️",
}

ALREADY_BLESSED: dict[Location, str] = {
    Location.THRONE_HALL: "The throne hall is already blessed. 🙏",
    Location.TEMPLE: "The temple has already accepted your offering. 🕯️",
}

# Guarded-route messages, keyed by destination
MISSING_ITEM: dict[Location, str] = {
    Location.THRONE_HALL: "A mysterious force prevents your entry to the throne hall. You need the royal binyeo. 💎",
}

NOT_BLESSED: dict[Location, str] = {
    Location.THRONE_HALL: "The throne hall requires the binyeo's blessing before entry. 🙏",
}


def inventory(items: list[Item]) -> list[str]:
    """Inventory listing, one bullet per held item in pickup order."""
    if not items:
        return ["Your inventory is empty. 👜"]
    return ["Your inventory contains:"] + [f"- {item.value} 🧳" for item in items]


def already_have(item: Item) -> str:
    return f"You already have the {item.value}. {ITEM_EMOJI[item]}"


def nothing_to_take(item: Item) -> str:
    return f"There's no {item.value} here to take. 🚫"


def missing_item(destination: Location, item: Item) -> str:
    return MISSING_ITEM.get(
        destination,
        f"You need the {item.value} to enter the {destination.display_name}. {ITEM_EMOJI[item]}",
    )


def not_blessed(destination: Location, sacred_place: Location) -> str:
    return NOT_BLESSED.get(
        destination,
        f"The {sacred_place.display_name} must be blessed before you can enter. 🙏",
    )


def describe_location(state: GameState) -> list[str]:
    """Describe the player's current location.

    Items still lying around are mentioned until the player picks them
    up. The temple's lines here are the exploratory description only;
    the controller decides whether it is shown at all.

    Args:
        state: Current game state

    Returns:
        Description lines for the current location
    """
    location = state.current_location

    if location == Location.MAIN_GATE:
        return [
            "You stand at Gwanghwamun, the main gate of Gyeongbokgung. 🚪",
            "The grand entrance to the palace complex lies before you.",
            "Available paths: go north to courtyard",
        ]

    if location == Location.COURTYARD:
        lines = [
            "You are in the main courtyard, Geunjeongmun. 🏞️",
            "Palace guards patrol in the distance.",
        ]
        if Item.BINYEO not in state.inventory:
            lines.append("A royal binyeo (jade hairpin) glints in the moonlight. 💎")
        lines.append(
            "Available paths: go north to throne hall, go east to library, go south to main gate"
        )
        return lines

    if location == Location.THRONE_HALL:
        return [
            "You stand in Geunjeongjeon, the majestic throne hall. 👑",
            "The king's empty throne casts long shadows.",
            "Available paths: go east to garden, go south to courtyard",
        ]

    if location == Location.LIBRARY:
        lines = [
            "You are in Gyujanggak, the royal library. 📚",
            "Ancient texts line the shelves.",
        ]
        if Item.SCROLL not in state.inventory:
            lines.append("A mysterious scroll catches your eye. 📜")
        lines.append("Available paths: go west to courtyard")
        return lines

    if location == Location.GARDEN:
        lines = [
            "You walk through Hyangwonjeong garden. 🌸",
            "A serene pavilion stands on an island in the pond.",
        ]
        if Item.INCENSE not in state.inventory:
            lines.append("Sacred incense burns nearby. 🕯️")
        lines.append("Available paths: go north to temple, go west to throne hall")
        return lines

    return [
        "You are in Jagyeongjeon, the sacred temple. ⛩️",
        "The air is thick with anticipation.",
        "Ancient secrets of Hangul might be hidden here...",
        "Available paths: go south to garden",
    ]
