"""Framing of command blocks exchanged with the earbuds."""

from __future__ import annotations

from dataclasses import dataclass

START_OF_FRAME = 0xFF


class PacketError(ValueError):
    """Raised when a received packet cannot be decoded."""


@dataclass(frozen=True)
class Command:
    """One command block: an operation code and its parameter bytes."""

    opcode: int
    parameters: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", bytes(self.parameters))

    def pack(self) -> bytes:
        """Frame this command as a single-command packet."""
        body = bytes([self.opcode, len(self.parameters) & 0xFF]) + self.parameters
        return bytes([START_OF_FRAME, len(body) & 0xFF]) + body


def parse_packet(packet: bytes) -> list[Command]:
    """Split a framed packet into its command blocks."""
    packet = bytes(packet)
    if len(packet) < 4 or packet[0] != START_OF_FRAME:
        raise PacketError("invalid packet: too short or missing SOF")
    if packet[1] + 2 != len(packet):
        raise PacketError("invalid packet: body length mismatch")

    commands: list[Command] = []
    offset = 2
    while offset < len(packet):
        if offset + 2 > len(packet):
            raise PacketError("invalid packet: truncated command block")
        opcode, length = packet[offset], packet[offset + 1]
        offset += 2
        if offset + length > len(packet):
            raise PacketError("invalid packet: truncated parameters")
        commands.append(Command(opcode, packet[offset:offset + length]))
        offset += length

    if not commands:
        raise PacketError("invalid packet: no commands found")
    return commands