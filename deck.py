# deck.py
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Union

# number -> treys rank character; 1 and 14 are both aces
RANKS: Dict[int, str] = {
    1: "A", 2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7",
    8: "8", 9: "9", 10: "T", 11: "J", 12: "Q", 13: "K", 14: "A",
}
RANK_NUMBERS: Dict[str, int] = {char: number for number, char in RANKS.items() if number != 1}

SUITS = ["s", "h", "d", "c"]  # spades, hearts, diamonds, clubs
SUIT_ALIASES = {
    "spade": "s", "spades": "s", "♠": "s",
    "heart": "h", "hearts": "h", "♥": "h",
    "diamond": "d", "diamonds": "d", "♦": "d",
    "club": "c", "clubs": "c", "♣": "c",
}


def normalize_suit(suit: str) -> str:
    key = suit.strip().lower()
    if key in SUITS:
        return key
    if key in SUIT_ALIASES:
        return SUIT_ALIASES[key]
    raise ValueError(f"Unknown suit: {suit!r}")


@dataclass(frozen=True)
class Card:
    number: int
    suit: str

    def __post_init__(self) -> None:
        if self.number not in RANKS:
            raise ValueError(f"Card number out of range: {self.number}")
        object.__setattr__(self, "suit", normalize_suit(self.suit))

    @classmethod
    def from_str(cls, text: str) -> "Card":
        """Parse 'Th' / '10h' / '2♣' style strings."""
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Cannot parse card: {text!r}")
        rank, suit = text[:-1].upper(), text[-1]
        if rank in RANK_NUMBERS:
            number = RANK_NUMBERS[rank]
        elif rank.isdigit() and int(rank) in RANKS:
            number = int(rank)
        else:
            raise ValueError(f"Cannot parse card rank: {text!r}")
        return cls(number=number, suit=normalize_suit(suit))

    @classmethod
    def from_dict(cls, data: Mapping) -> "Card":
        number = int(data["number"])
        if number not in RANKS:
            raise ValueError(f"Card number out of range: {number}")
        return cls(number=number, suit=normalize_suit(str(data["suit"])))

    @classmethod
    def coerce(cls, value: Union["Card", str, Mapping]) -> "Card":
        if isinstance(value, Card):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        return cls.from_dict(value)

    def as_dict(self) -> Dict:
        return {"number": self.number, "suit": self.suit}

    def __str__(self) -> str:
        return f"{RANKS[self.number]}{self.suit}"

    def __repr__(self) -> str:
        return str(self)


def parse_hand(text: Union[str, Sequence]) -> List[Card]:
    """Build a hand from 'Th 2c ...' or a sequence of cards/strings/dicts."""
    items = text.split() if isinstance(text, str) else text
    return [Card.coerce(item) for item in items]
