''' Opcode schema registry '''

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

import rplan.common.abitypes as t
from rplan.common.commands import CommandType, REVERTABLE_COMMANDS
from rplan.common.errors import ParameterMismatch, UnknownOpcode
from rplan.common.grammar import parse_param


PERMIT_DETAILS_STRUCT = \
    '(address token,uint160 amount,uint48 expiration,uint48 nonce)'

PERMIT_STRUCT = \
    f'({PERMIT_DETAILS_STRUCT} details, address spender, uint256 sigDeadline)'

PERMIT_BATCH_STRUCT = \
    f'({PERMIT_DETAILS_STRUCT}[] details, address spender, uint256 sigDeadline)'

NFT_FILL = ['uint256', 'bytes']
NFT_FILL_721 = NFT_FILL + ['address', 'address', 'uint256']
NFT_FILL_1155 = NFT_FILL_721 + ['uint256']

ABI_DEFINITION: dict[CommandType, list[str]] = {
    CommandType.V3_SWAP_EXACT_IN: ['address', 'uint256', 'uint256', 'bytes', 'bool'],
    CommandType.V3_SWAP_EXACT_OUT: ['address', 'uint256', 'uint256', 'bytes', 'bool'],
    CommandType.PERMIT2_TRANSFER_FROM: ['address', 'address', 'uint160'],
    CommandType.PERMIT2_PERMIT_BATCH: [PERMIT_BATCH_STRUCT, 'bytes'],
    CommandType.SWEEP: ['address', 'address', 'uint256'],
    CommandType.TRANSFER: ['address', 'address', 'uint256'],
    CommandType.PAY_PORTION: ['address', 'address', 'uint256'],
    CommandType.V2_SWAP_EXACT_IN: ['address', 'uint256', 'uint256', 'address[]', 'bool'],
    CommandType.V2_SWAP_EXACT_OUT: ['address', 'uint256', 'uint256', 'address[]', 'bool'],
    CommandType.PERMIT: [PERMIT_STRUCT, 'bytes'],
    CommandType.WRAP_ETH: ['address', 'uint256'],
    CommandType.UNWRAP_WETH: ['address', 'uint256'],
    CommandType.PERMIT2_TRANSFER_FROM_BATCH: ['bytes'],
    CommandType.SEAPORT: NFT_FILL,
    CommandType.LOOKS_RARE_721: NFT_FILL_721,
    CommandType.NFTX: NFT_FILL,
    CommandType.CRYPTOPUNKS: ['uint256', 'address', 'uint256'],
    CommandType.LOOKS_RARE_1155: NFT_FILL_1155,
    CommandType.OWNER_CHECK_721: ['address', 'address', 'uint256'],
    CommandType.OWNER_CHECK_1155: ['address', 'address', 'uint256', 'uint256'],
    CommandType.X2Y2_721: NFT_FILL_721,
    CommandType.SUDOSWAP: NFT_FILL,
    CommandType.NFT20: NFT_FILL,
    CommandType.X2Y2_1155: NFT_FILL_1155,
    CommandType.FOUNDATION: NFT_FILL_721,
}


@dataclass(frozen=True)
class Schema:
    command_type: CommandType
    params: tuple[t.Field, ...]

    def types(self) -> list[t.AbiType]:
        return [p.abi_type for p in self.params]

    def canonical(self) -> list[str]:
        return [p.abi_type.canonical() for p in self.params]

    def check(self, parameters: Sequence[Any]):
        name = self.command_type.name

        if isinstance(parameters, (str, bytes)) or not isinstance(parameters, Sequence):
            raise ParameterMismatch(f'{name}: parameters must be a list or tuple')

        if len(parameters) != len(self.params):
            raise ParameterMismatch(
                f'{name}: need {len(self.params)} parameters, got {len(parameters)}'
            )

        for i, (param, value) in enumerate(zip(self.params, parameters)):
            param.abi_type.check(value, f'{name}[{i}]')

    def __str__(self) -> str:
        return f'{self.command_type.name}({",".join(self.canonical())})'


def build_schemas(definition: Mapping[CommandType, list[str]]):
    schemas = {
        command_type: Schema(command_type, tuple(parse_param(p) for p in params))
        for command_type, params in definition.items()
    }

    return MappingProxyType(schemas)


SCHEMAS: Mapping[CommandType, Schema] = build_schemas(ABI_DEFINITION)


def resolve(opcode: int) -> CommandType:
    if isinstance(opcode, bool) or not isinstance(opcode, int):
        raise UnknownOpcode(opcode)

    try:
        command_type = CommandType(opcode)
    except ValueError:
        raise UnknownOpcode(opcode) from None

    if command_type not in SCHEMAS:
        raise UnknownOpcode(opcode)

    return command_type


def lookup(opcode: int) -> Schema:
    return SCHEMAS[resolve(opcode)]


def is_revertable(opcode: int) -> bool:
    return resolve(opcode) in REVERTABLE_COMMANDS


def by_name(name: str) -> CommandType:
    try:
        return CommandType[name.upper()]
    except KeyError:
        raise UnknownOpcode(name) from None
