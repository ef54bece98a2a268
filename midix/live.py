"""Events of a live MIDI stream."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .errors import InvalidDataError
from .system import SystemCommonMessage, SystemExclusiveMessage, SystemRealTimeMessage
from .voice import ChannelModeMessage, ChannelVoiceMessage

__all__ = ["LiveEvent", "MidiMessage"]

from .primitives import FromLiveEventBytes

_LIVE_MESSAGES = (ChannelVoiceMessage, SystemCommonMessage, SystemRealTimeMessage)


@dataclass(frozen=True)
class LiveEvent(FromLiveEventBytes):
    """A message sent to or received from a streaming MIDI device."""

    MIN_STATUS_BYTE: ClassVar[int] = 0x80
    MAX_STATUS_BYTE: ClassVar[int] = 0xFF

    message: Union[ChannelVoiceMessage, SystemCommonMessage, SystemRealTimeMessage]

    def __post_init__(self) -> None:
        if not isinstance(self.message, _LIVE_MESSAGES):
            raise TypeError(
                f"{type(self.message).__name__} cannot be sent as a live event"
            )

    @classmethod
    def from_status_and_data(cls, status: int, data: Any) -> LiveEvent:
        """Decode a live event from its status byte and data bytes."""
        status = operator.index(status)
        data = bytes(data)
        if 0x80 <= status <= 0xEF:
            return cls(ChannelVoiceMessage.from_status_and_data(status, data))
        if 0xF0 <= status <= 0xF7:
            return cls(SystemCommonMessage.from_status_and_data(status, data))
        if 0xF8 <= status <= 0xFF:
            return cls(SystemRealTimeMessage.from_status_and_data(status, data))
        raise InvalidDataError("Received a status that is not a midi message")

    def channel_voice(self) -> ChannelVoiceMessage | None:
        """The channel voice message, if this event is one."""
        if isinstance(self.message, ChannelVoiceMessage):
            return self.message
        return None

    def to_bytes(self) -> bytes:
        """The event as bytes for a live MIDI stream."""
        return self.message.to_bytes()


MidiMessage = Union[
    SystemCommonMessage,
    SystemRealTimeMessage,
    SystemExclusiveMessage,
    ChannelVoiceMessage,
    ChannelModeMessage,
]