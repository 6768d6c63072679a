import sys
import json
from pathlib import Path
import logging as lg
import traceback

import click

from rplan.common.errors import EncodingError, PlannerError
from rplan.common.settings import PlannerSettings
from rplan.planner.planfile import load_plan


EXIT_OK = 0
EXIT_PLAN_ERROR = 2
EXIT_EXEC_ERROR = 100


def build(settings: PlannerSettings, plan: Path, output: Path):
    planner = load_plan(plan)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(planner.json(), indent=settings.indent) + '\n')
    lg.info(f'Wrote {len(planner)} commands to {output}')


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--indent', type=int, default=2, help='JSON indent, 0 for compact')
@click.argument('plan', type=Path)
@click.argument('output', type=Path)
def run(verbose: bool, indent: int, plan: Path, output: Path):
    settings = PlannerSettings().update(verbose=verbose, indent=indent)
    lg.basicConfig(level=settings.log_level())
    lg.info('RPLAN BUILD')

    try:
        build(settings, plan, output)
        sys.exit(EXIT_OK)

    except (PlannerError, EncodingError) as e:
        lg.error(f'Plan rejected: {e}')
        sys.exit(EXIT_PLAN_ERROR)

    except Exception as e:
        lg.error(f'Build failed on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
