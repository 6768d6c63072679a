''' TOML plan files '''

import logging as lg
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from eth_utils import decode_hex

import rplan.common.abitypes as t
import rplan.common.registry as registry
from rplan.common.commands import CommandType
from rplan.common.errors import PlanFileError
from rplan.planner.planner import RoutePlanner


@dataclass(frozen=True)
class PlanEntry:
    command_type: CommandType
    params: list[Any]
    allow_revert: bool


def coerce_int(value: Any, path: str):
    if isinstance(value, str):
        try:
            if value[:2].lower() == '0x':
                return int(value, 16)

            return int(value, 10)
        except ValueError:
            raise PlanFileError(f'{path}: invalid integer {value!r}') from None

    return value


def coerce_bytes(value: Any, path: str):
    if isinstance(value, str):
        try:
            return decode_hex(value)
        except ValueError:
            raise PlanFileError(f'{path}: invalid hex string {value!r}') from None

    return value


def coerce_tuple(abi_type: t.TupleType, value: Any, path: str):
    if isinstance(value, dict):
        names = abi_type.field_names()
        unknown = set(value) - set(names)

        if unknown:
            raise PlanFileError(f'{path}: unknown fields {sorted(unknown)}')

        missing = [n for n in names if n not in value]

        if missing:
            raise PlanFileError(f'{path}: missing fields {missing}')

        value = [value[n] for n in names]

    if isinstance(value, list):
        return [
            coerce(f.abi_type, v, f'{path}.{f.name or i}')
            for i, (f, v) in enumerate(zip(abi_type.fields, value))
        ] + value[len(abi_type.fields):]

    return value


def coerce(abi_type: t.AbiType, value: Any, path: str):
    if isinstance(abi_type, t.UIntType):
        return coerce_int(value, path)

    if isinstance(abi_type, t.BytesType):
        return coerce_bytes(value, path)

    if isinstance(abi_type, t.ArrayType) and isinstance(value, list):
        return [coerce(abi_type.item, v, f'{path}[{i}]') for i, v in enumerate(value)]

    if isinstance(abi_type, t.TupleType):
        return coerce_tuple(abi_type, value, path)

    return value


def parse_entry(index: int, table: Any) -> PlanEntry:
    path = f'command[{index}]'

    if not isinstance(table, dict):
        raise PlanFileError(f'{path}: expected a table')

    if 'type' not in table:
        raise PlanFileError(f'{path}: missing command type')

    schema = registry.lookup(registry.by_name(str(table['type'])))
    params = table.get('params', [])
    allow_revert = table.get('allow_revert', False)

    if not isinstance(params, list):
        raise PlanFileError(f'{path}: params must be an array')

    if not isinstance(allow_revert, bool):
        raise PlanFileError(f'{path}: allow_revert must be a boolean')

    # Arity is left to the planner
    coerced = [
        coerce(p.abi_type, v, f'{path}.params[{i}]')
        for i, (p, v) in enumerate(zip(schema.params, params))
    ] + params[len(schema.params):]

    return PlanEntry(schema.command_type, coerced, allow_revert)


def parse_plan(contents: str) -> list[PlanEntry]:
    try:
        document = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as e:
        raise PlanFileError(f'Malformed plan: {e}') from e

    tables = document.get('command', [])

    if not isinstance(tables, list):
        raise PlanFileError('Expected [[command]] tables')

    return [parse_entry(i, table) for i, table in enumerate(tables)]


def build_plan(entries: list[PlanEntry]) -> RoutePlanner:
    planner = RoutePlanner()

    for entry in entries:
        planner.add_command(entry.command_type, entry.params, entry.allow_revert)

    return planner


def load_plan(filepath: str | Path) -> RoutePlanner:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading plan {filepath}')
    entries = parse_plan(filepath.read_text())
    lg.info(f'Plan {filepath.stem}: {len(entries)} commands')
    return build_plan(entries)
