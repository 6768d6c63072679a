''' ABI type descriptors for command parameters '''

from dataclasses import dataclass
from typing import Any, TypeAlias

from eth_utils import is_address

from rplan.common.errors import ParameterMismatch


JSON: TypeAlias = dict[str, Any]


def describe(value: Any) -> str:
    text = repr(value)

    if len(text) > 40:
        text = text[:37] + '...'

    return f'{type(value).__name__} {text}'


@dataclass(frozen=True)
class AbiType:
    def canonical(self) -> str:
        raise NotImplementedError()

    def check(self, value: Any, path: str):
        raise NotImplementedError()

    def mismatch(self, value: Any, path: str, reason: str | None = None):
        message = f'{path}: expected {self}, got {describe(value)}'

        if reason is not None:
            message += f' ({reason})'

        raise ParameterMismatch(message)

    def json(self) -> JSON:
        return {'Class': self.__class__.__name__, 'Type': self.canonical()}

    def __str__(self) -> str:
        return self.canonical()


@dataclass(frozen=True)
class UIntType(AbiType):
    bits: int

    def __post_init__(self):
        if self.bits < 8 or self.bits > 256 or self.bits % 8:
            raise ValueError(f'Invalid uint width {self.bits}')

    def canonical(self) -> str:
        return f'uint{self.bits}'

    def check(self, value: Any, path: str):
        if isinstance(value, bool) or not isinstance(value, int):
            self.mismatch(value, path)

        if value < 0 or value >= 1 << self.bits:
            self.mismatch(value, path, 'out of range')


@dataclass(frozen=True)
class AddressType(AbiType):
    def canonical(self) -> str:
        return 'address'

    def check(self, value: Any, path: str):
        if not is_address(value):
            self.mismatch(value, path)


@dataclass(frozen=True)
class BoolType(AbiType):
    def canonical(self) -> str:
        return 'bool'

    def check(self, value: Any, path: str):
        if not isinstance(value, bool):
            self.mismatch(value, path)


@dataclass(frozen=True)
class BytesType(AbiType):
    def canonical(self) -> str:
        return 'bytes'

    def check(self, value: Any, path: str):
        if not isinstance(value, (bytes, bytearray)):
            self.mismatch(value, path)


@dataclass(frozen=True)
class ArrayType(AbiType):
    item: AbiType

    def canonical(self) -> str:
        return f'{self.item.canonical()}[]'

    def check(self, value: Any, path: str):
        if not isinstance(value, (list, tuple)):
            self.mismatch(value, path)

        for i, element in enumerate(value):
            self.item.check(element, f'{path}[{i}]')

    def json(self) -> JSON:
        data = super().json()
        data['Item'] = self.item.json()
        return data


@dataclass(frozen=True)
class Field:
    name: str | None
    abi_type: AbiType


@dataclass(frozen=True)
class TupleType(AbiType):
    fields: tuple[Field, ...]

    def canonical(self) -> str:
        return '(' + ','.join(f.abi_type.canonical() for f in self.fields) + ')'

    def field_names(self) -> list[str | None]:
        return [f.name for f in self.fields]

    def check(self, value: Any, path: str):
        if not isinstance(value, (list, tuple)):
            self.mismatch(value, path)

        if len(value) != len(self.fields):
            self.mismatch(value, path, f'need {len(self.fields)} fields, got {len(value)}')

        for i, (field, element) in enumerate(zip(self.fields, value)):
            label = field.name if field.name is not None else str(i)
            field.abi_type.check(element, f'{path}.{label}')

    def json(self) -> JSON:
        data = super().json()
        data['Fields'] = [
            {'Name': f.name, 'Type': f.abi_type.json()} for f in self.fields
        ]
        return data


Address = AddressType()
Bool = BoolType()
Bytes = BytesType()
UInt256 = UIntType(256)
