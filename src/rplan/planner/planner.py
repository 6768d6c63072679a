import logging as lg
from dataclasses import dataclass
from typing import Any, Sequence, TypeAlias

from eth_abi import encode
from eth_utils import encode_hex

import rplan.common.registry as registry
from rplan.common.commands import CommandType, ALLOW_REVERT_FLAG
from rplan.common.errors import RevertNotAllowed


Parameters: TypeAlias = Sequence[Any]


@dataclass(frozen=True)
class Command:
    command_type: CommandType
    allow_revert: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'command_type', registry.resolve(self.command_type))

        if self.allow_revert and not registry.is_revertable(self.command_type):
            raise RevertNotAllowed(self.command_type)

    def byte(self) -> int:
        if self.allow_revert:
            return self.command_type | ALLOW_REVERT_FLAG

        return int(self.command_type)


@dataclass(frozen=True)
class RouterCommand:
    command_type: CommandType
    encoded_input: bytes


def create_command(command_type: int, parameters: Parameters) -> RouterCommand:
    schema = registry.lookup(command_type)
    schema.check(parameters)
    encoded_input = encode(schema.canonical(), parameters)
    return RouterCommand(schema.command_type, encoded_input)


class RoutePlanner:
    ''' Accumulates commands as paired header bytes and encoded inputs '''
    commands: bytearray
    inputs: list[bytes]

    def __init__(self):
        self.commands = bytearray()
        self.inputs = list()

    def add_command(
        self,
        command_type: int,
        parameters: Parameters,
        allow_revert: bool = False
    ):
        router_command = create_command(command_type, parameters)
        command = Command(router_command.command_type, allow_revert)
        self._append(command, router_command.encoded_input)

    def _append(self, command: Command, encoded_input: bytes):
        lg.debug(f'Issuing command 0x{command.byte():02x} {command.command_type.name}')
        self.inputs.append(encoded_input)
        self.commands.append(command.byte())

    def extend(self, other: 'RoutePlanner'):
        self.inputs.extend(other.inputs)
        self.commands.extend(other.commands)
        return self

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def commands_hex(self) -> str:
        return '0x' + self.commands.hex()

    @property
    def inputs_hex(self) -> list[str]:
        return [encode_hex(i) for i in self.inputs]

    def json(self):
        return {
            'commands': self.commands_hex,
            'inputs': self.inputs_hex
        }
