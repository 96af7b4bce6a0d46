"""runa CLI - edit distance and alignment of DNA test instances.

Commands:
  - run: Run one distance or alignment function on an instance file
  - limits: Largest instance size each distance handles within the time budget
  - plot: Print (size,seconds) pairs of one function for gnuplot
"""
from pathlib import Path
from typing import Callable, Optional

import typer
from rich import print

from runa.align.engine import DISTANCES, SOLUTIONS
from runa.align.solution import prog_dyn
from runa.bench import lapse_limit, lapse_sequence
from runa.dna import DNA, DnaBlock, InstanceFormatError
from runa.io import InstanceNotFoundError, read_test_insts_by_size
from runa.utils.resources import RESOURCES, ConfigError

app = typer.Typer(add_completion=False, no_args_is_help=True)

FUNCTIONS = (*DISTANCES, *SOLUTIONS, 'prog_dyn')


def _runner(function: str) -> Callable[[DnaBlock], object]:
    """Wraps a named function so it can be called on a block."""
    if function in DISTANCES: return lambda block: DISTANCES[function](block.x, block.y, DNA)
    if function in SOLUTIONS: return lambda block: SOLUTIONS[function](block.x, block.y, DNA)
    if function == 'prog_dyn': return lambda block: prog_dyn(block.x, block.y, DNA)
    print(f'Invalid argument! Function {function} is not supported by this program')
    print('please select one function among:')
    for name in FUNCTIONS: print(f'  - {name}')
    raise typer.Exit(code=1)


def _progress(size: int, seconds: float) -> None:
    print(f'completed call of size {size} in {seconds:.6f}s')


@app.command(name='run')
def run_cmd(
        instance: Path = typer.Argument(..., exists=True, dir_okay=False, help='Instance file (.adn)'),
        function: str = typer.Argument(..., help=f'One of {", ".join(FUNCTIONS)}'),
        width: int = typer.Option(60, min=1, help='Alignment columns per line'),
) -> None:
    """Run one distance or alignment function on an instance."""
    func = _runner(function)
    try: block = DnaBlock.parse(instance.read_text())
    except InstanceFormatError as e: raise typer.BadParameter(str(e), param_hint='INSTANCE') from e
    result = func(block)
    if function in DISTANCES:
        print(f'distance: {result}')
    elif function in SOLUTIONS:
        print(f'alignment:\n{result.format(width)}')
    else:
        cost, aln = result
        print(f'alignment:\n{aln.format(width)}')
        print(f'cost: {cost}')


@app.command(name='limits')
def limits_cmd(
        data_dir: Optional[Path] = typer.Option(None, '--data-dir', file_okay=False, help='Instance directory, GENOME_DATA by default'),
        budget: Optional[float] = typer.Option(None, min=0, help='Seconds allowed per call, RUNA_BENCH_BUDGET by default'),
) -> None:
    """Find the largest instance size each distance handles within the budget."""
    try: budget = RESOURCES.bench_budget if budget is None else budget
    except ConfigError as e: raise typer.BadParameter(str(e), param_hint='--budget') from e
    for name in ('dist_2', 'dist_1', 'dist_naif'):
        try: limit = lapse_limit(_runner(name), read_test_insts_by_size(data_dir), budget, _progress)
        except (ConfigError, InstanceNotFoundError) as e: raise typer.BadParameter(str(e), param_hint="--data-dir") from e
        print(f'the limit of {name} is {limit}')


@app.command(name='plot')
def plot_cmd(
        function: str = typer.Argument(..., help=f'One of {", ".join(FUNCTIONS)}'),
        data_dir: Optional[Path] = typer.Option(None, '--data-dir', file_okay=False, help='Instance directory, GENOME_DATA by default'),
        budget: Optional[float] = typer.Option(None, min=0, help='Stop after the first call slower than this'),
) -> None:
    """Print (size,seconds) pairs for gnuplot."""
    func = _runner(function)
    try:
        budget = RESOURCES.bench_budget if budget is None else budget
        points = []
        for seconds, size in lapse_sequence(func, read_test_insts_by_size(data_dir)):
            points.append(f'({size},{seconds:.6f})')
            if seconds >= budget: break
    except (ConfigError, InstanceNotFoundError) as e: raise typer.BadParameter(str(e)) from e
    print(''.join(points))


def main() -> None:
    app()


if __name__ == '__main__':
    main()
