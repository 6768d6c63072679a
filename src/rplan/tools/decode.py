import sys
import json
from pathlib import Path
import logging as lg
import traceback

import click
from eth_abi.exceptions import DecodingError

from rplan.common.errors import PlannerError
from rplan.common.settings import PlannerSettings
from rplan.planner.decoder import decode_commands
from rplan.tools.build import EXIT_OK, EXIT_PLAN_ERROR, EXIT_EXEC_ERROR


def load_buffer(filepath: Path):
    data = json.loads(filepath.read_text())

    if not isinstance(data, dict) or 'commands' not in data or 'inputs' not in data:
        raise PlannerError(f'{filepath}: expected an object with commands and inputs')

    return decode_commands(data['commands'], data['inputs'])


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('buffer', type=Path)
def run(verbose: bool, buffer: Path):
    settings = PlannerSettings().update(verbose=verbose)
    lg.basicConfig(level=settings.log_level())

    try:
        for index, decoded in enumerate(load_buffer(buffer)):
            click.echo(f'{index:3} 0x{decoded.command.byte():02x} {decoded}')

        sys.exit(EXIT_OK)

    except (PlannerError, DecodingError) as e:
        lg.error(f'Buffer rejected: {e}')
        sys.exit(EXIT_PLAN_ERROR)

    except Exception as e:
        lg.error(f'Decoding failed on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
