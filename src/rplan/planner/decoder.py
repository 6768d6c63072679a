''' Dispatcher-side view of a command buffer '''

from dataclasses import dataclass
from typing import Any, Sequence

from eth_abi import decode
from eth_utils import decode_hex

import rplan.common.registry as registry
from rplan.common.commands import ALLOW_REVERT_FLAG, COMMAND_TYPE_MASK
from rplan.common.errors import PlanMismatch
from rplan.planner.planner import Command


@dataclass(frozen=True)
class DecodedCommand:
    command: Command
    values: tuple[Any, ...]

    def __str__(self) -> str:
        flag = ' allow-revert' if self.command.allow_revert else ''
        return f'{self.command.command_type.name}{flag} {self.values}'


def as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return decode_hex(data)

    if not isinstance(data, (bytes, bytearray)):
        raise PlanMismatch(f'Expected bytes or hex string, got {type(data).__name__}')

    return bytes(data)


def split_byte(header: int) -> Command:
    command_type = registry.resolve(header & COMMAND_TYPE_MASK)
    return Command(command_type, bool(header & ALLOW_REVERT_FLAG))


def decode_command(header: int, encoded_input: bytes | str) -> DecodedCommand:
    command = split_byte(header)
    schema = registry.lookup(command.command_type)
    values = decode(schema.canonical(), as_bytes(encoded_input))
    return DecodedCommand(command, tuple(values))


def decode_commands(
    commands: bytes | str,
    inputs: Sequence[bytes | str]
) -> list[DecodedCommand]:
    headers = as_bytes(commands)

    if len(headers) != len(inputs):
        raise PlanMismatch(
            f'Got {len(headers)} commands but {len(inputs)} inputs'
        )

    return [decode_command(h, i) for h, i in zip(headers, inputs)]
