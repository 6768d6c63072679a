''' Human-readable ABI type grammar '''

import pyparsing as pp

import rplan.common.abitypes as t


def g_keyword(literal: str, abi_type: t.AbiType):
    return pp.Keyword(literal).set_parse_action(lambda _: abi_type)


def on_uint(r):
    bits = r.get('bits')
    return t.UIntType(int(bits) if bits else 256)


def on_type(r):
    abi_type = r[0]

    for _ in r[1:]:
        abi_type = t.ArrayType(abi_type)

    return abi_type


def on_field(r):
    name = r[1] if len(r) > 1 else None
    return t.Field(name, r[0])


def on_tuple(r):
    return t.TupleType(tuple(r))


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')

uint_type = pp.Regex(r'uint(?P<bits>[0-9]*)(?![A-Za-z0-9_])').set_parse_action(on_uint)

base_type = uint_type \
    ^ g_keyword('address', t.Address) \
    ^ g_keyword('bool', t.Bool) \
    ^ g_keyword('bytes', t.Bytes)

type_expr = pp.Forward()
field = (type_expr + pp.Optional(id)).set_parse_action(on_field)

tuple_type = (
    pp.Suppress('(')
    + pp.Optional(field + pp.ZeroOrMore(pp.Suppress(',') + field))
    + pp.Suppress(')')
).set_parse_action(on_tuple)

type_expr <<= ((tuple_type | base_type) + pp.ZeroOrMore(pp.Literal('[]'))).set_parse_action(on_type)

param = field + pp.StringEnd()


def parse_param(text: str) -> t.Field:
    try:
        return param.parse_string(text)[0]
    except pp.ParseException as e:
        raise ValueError(f'Invalid ABI type {text!r}: {e}') from e


def parse_type(text: str) -> t.AbiType:
    return parse_param(text).abi_type
