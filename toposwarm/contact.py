"""Recording of bumper contact events and saving them to a text file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DELIMITER_DOUBLE_COLON = "::"
DELIMITER_TIMESTAMP = "time:"
LENGTH_TIME_TOKEN = 7
MAX_COUNT_CONTACT_EVENT = 500

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class Vector3:
    """A point or direction in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class ContactState:
    """A single contact reported by a bumper sensor."""

    info: str = ""
    contact_positions: list[Vector3] = field(default_factory=list)


@dataclass
class ContactsState:
    """A bumper sensor message holding zero or more contacts."""

    states: list[ContactState] = field(default_factory=list)


@dataclass
class ContactEvent:
    """A recorded contact: when, where, and which geometries touched."""

    time: float
    position: Vector3
    my_geometry: str
    other_geometry: str

    def format_line(self) -> str:
        """Return the event as one line of the output file."""
        return (
            f"t: {self.time:g},\tx: {self.position.x:g},\ty: {self.position.y:g},"
            f"\tm: {self.my_geometry},\to: {self.other_geometry}\n"
        )


def parse_for_link(info: str, key: str) -> str:
    """Return the object name following ``key`` in a contact info string."""
    index = info.find(key)
    if index < 0:
        raise ValueError(f"key {key!r} not found in contact info")
    token = info[index + len(key):]
    return token.split(DELIMITER_DOUBLE_COLON, 1)[0]


def parse_contact_time(info: str) -> float:
    """Return the timestamp found after ``time:`` in a contact info string.

    Only the first characters of the token are read; a token without a
    leading number gives 0.0.
    """
    index = info.find(DELIMITER_TIMESTAMP)
    if index < 0:
        raise ValueError("timestamp not found in contact info")
    start = index + len(DELIMITER_TIMESTAMP)
    token = info[start:start + LENGTH_TIME_TOKEN]
    match = _LEADING_FLOAT.match(token)
    return float(match.group(1)) if match else 0.0


def event_from_state(state: ContactState) -> ContactEvent:
    """Build a contact event from the first position of a contact state."""
    if not state.contact_positions:
        raise ValueError("contact state has no contact positions")
    return ContactEvent(
        time=parse_contact_time(state.info),
        position=state.contact_positions[0],
        my_geometry=parse_for_link(state.info, "my geom:"),
        other_geometry=parse_for_link(state.info, "other geom:"),
    )


def file_name_for_node(node_name: str) -> str:
    """Return the output file name for a node: its name without slashes."""
    return node_name.replace("/", "") + ".txt"


class ContactRecorder:
    """Collects contact events until a limit, then saves them once."""

    def __init__(
        self,
        node_name: str,
        directory: str | Path = ".",
        limit: int = MAX_COUNT_CONTACT_EVENT,
    ) -> None:
        self.node_name = node_name
        self.directory = Path(directory)
        self.limit = limit
        self.events: list[ContactEvent] = []
        self.saved = False

    @property
    def path(self) -> Path:
        return self.directory / file_name_for_node(self.node_name)

    def receive(self, msg: ContactsState) -> None:
        """Handle a sensor message, or save the events once the limit is hit."""
        if len(self.events) < self.limit:
            self.handle(msg)
        elif not self.saved:
            self.saved = True
            try:
                self.write()
            except OSError:
                logger.error('Unable to open file "%s" for writing.', self.path)

    def handle(self, msg: ContactsState) -> None:
        """Record the first contact of a message, if it has any."""
        if not msg.states:
            return
        size = len(self.events)
        if size < 10 or size % 10 == 0:
            logger.info("Recording contact event #%d.", size)
        self.events.append(event_from_state(msg.states[0]))

    def write(self) -> Path:
        """Write all recorded events to the node's file and return its path."""
        path = self.path
        with path.open("w", encoding="utf-8") as file:
            file.writelines(event.format_line() for event in self.events)
        logger.info('Saved %d contact events to file "%s".', len(self.events), path)
        return path