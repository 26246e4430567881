from dataclasses import dataclass

from gametester.constants import PLAYER_NAME_CAPACITY
from gametester.errors import InvalidPlayerName


@dataclass(frozen=True)
class PlayerIdentity:
    """
    Player name as handed to the game program.

    The game stores names in a fixed buffer of PLAYER_NAME_CAPACITY bytes,
    so any name whose UTF-8 encoding is longer is rejected rather than cut.

    `name` keeps undecodable bytes as surrogate escapes, the way names
    arrive through argv, so the exact bytes reach the game. Use
    `display_name` for anything shown to the user.
    """
    name: str

    def __post_init__(self):
        try:
            size = len(self.name.encode("utf-8", errors="surrogateescape"))
        except UnicodeEncodeError as e:
            raise InvalidPlayerName(f"Player name {self.name!r} is not encodable: {e}") from e
        if size > PLAYER_NAME_CAPACITY:
            raise InvalidPlayerName(
                f"Player name {self.display_name!r} is {size} bytes long "
                f"(max {PLAYER_NAME_CAPACITY})"
            )

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'PlayerIdentity':
        """
        Build a name from raw bytes, e.g. a zero padded buffer.

        Trailing zero bytes are dropped. Invalid UTF-8 is kept byte for byte
        and only replaced in the display name.
        """
        if len(raw) > PLAYER_NAME_CAPACITY:
            raise InvalidPlayerName(
                f"Player name is {len(raw)} bytes long (max {PLAYER_NAME_CAPACITY})"
            )
        return cls(raw.rstrip(b"\0").decode("utf-8", errors="surrogateescape"))

    @property
    def argv_name(self) -> str:
        """Name passed on the game's command line, bytes preserved."""
        return self.name.rstrip("\0")

    @property
    def encoded(self) -> bytes:
        return self.argv_name.encode("utf-8", errors="surrogateescape")

    @property
    def display_name(self) -> str:
        """Best-effort text, invalid UTF-8 shown as U+FFFD."""
        return self.encoded.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return self.display_name
