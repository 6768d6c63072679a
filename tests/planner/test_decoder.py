# type: ignore
import pytest

from rplan.common.commands import CommandType
from rplan.common.errors import PlanMismatch, RevertNotAllowed, UnknownOpcode
from rplan.planner.decoder import decode_commands, decode_command

from unit_utils import RECIPIENT, TOKEN
from fixtures import planner  # noqa: F401


def fill(planner):  # noqa: F811
    planner.add_command(CommandType.WRAP_ETH, [RECIPIENT, 100])
    planner.add_command(CommandType.NFTX, [5, b'\xca\xfe'], allow_revert=True)
    planner.add_command(CommandType.V2_SWAP_EXACT_IN, [RECIPIENT, 100, 90, [TOKEN, RECIPIENT], True])
    return planner


def test_decodes_planner_output(planner):  # noqa: F811
    decoded = decode_commands(fill(planner).commands, planner.inputs)

    assert [d.command.command_type for d in decoded] == [
        CommandType.WRAP_ETH,
        CommandType.NFTX,
        CommandType.V2_SWAP_EXACT_IN,
    ]
    assert [d.command.allow_revert for d in decoded] == [False, True, False]
    assert decoded[0].values == (RECIPIENT, 100)
    assert decoded[1].values == (5, b'\xca\xfe')
    assert decoded[2].values == (RECIPIENT, 100, 90, (TOKEN, RECIPIENT), True)


def test_decodes_hex(planner):  # noqa: F811
    data = fill(planner).json()
    decoded = decode_commands(data['commands'], data['inputs'])

    assert [d.command.byte() for d in decoded] == [0x0B, 0x92, 0x08]


def test_length_mismatch(planner):  # noqa: F811
    fill(planner)

    with pytest.raises(PlanMismatch):
        decode_commands(planner.commands, planner.inputs[:-1])


def test_flag_on_non_revertable(planner):  # noqa: F811
    planner.add_command(CommandType.SWEEP, [TOKEN, RECIPIENT, 1])

    with pytest.raises(RevertNotAllowed):
        decode_command(0x84, planner.inputs[0])


def test_reserved_header():
    with pytest.raises(UnknownOpcode):
        decode_command(0x17, b'')


def test_str(planner):  # noqa: F811
    fill(planner)
    decoded = decode_commands(planner.commands, planner.inputs)

    assert str(decoded[1]) == "NFTX allow-revert (5, b'\\xca\\xfe')"


@pytest.mark.parametrize('commands,inputs', [
    ('0x0b', [64]),
    ('0x0b', [None]),
    (11, [b'']),
])
def test_rejects_non_bytes(commands, inputs):
    with pytest.raises(PlanMismatch):
        decode_commands(commands, inputs)
