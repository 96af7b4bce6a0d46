"""
Resource, configuration and optional dependency management.
"""
from functools import cached_property, lru_cache
from importlib import import_module
from pathlib import Path
from typing import Callable
from warnings import warn
import os


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class RunaWarning(Warning): pass
class DependencyWarning(RunaWarning): pass
class PerformanceWarning(RunaWarning): pass


class ConfigError(Exception):
    """Raised when a required setting is missing from the environment."""


# Classes --------------------------------------------------------------------------------------------------------------
class Resources:
    """
    Manages optional dependencies and environment driven settings.

    Attributes:
        package (str): The package name.

    Examples:
        >>> RESOURCES.has_module('numpy')
        True
    """
    GENOME_DATA_VAR = 'GENOME_DATA'
    BENCH_BUDGET_VAR = 'RUNA_BENCH_BUDGET'
    DEFAULT_BENCH_BUDGET = 60.0

    def __init__(self) -> None:
        self.package = Path(__file__).parent.parent.name

    @cached_property
    def has_numba(self) -> bool:
        """Checks whether numba kernels are compiled or run as plain Python."""
        if self.has_module('numba'): return True
        warn('numba is not installed, alignment kernels will run as plain Python', DependencyWarning)
        return False

    @property
    def genome_data(self) -> Path:
        """
        Directory holding the `.adn` test instances.

        Raises:
            ConfigError: If the environment variable is not set.
        """
        if not (value := os.environ.get(self.GENOME_DATA_VAR)):
            raise ConfigError(f'{self.GENOME_DATA_VAR} is not set, cannot locate test instances')
        return Path(value)

    @property
    def bench_budget(self) -> float:
        """Seconds a single benchmarked call may take before the harness stops."""
        if (value := os.environ.get(self.BENCH_BUDGET_VAR)) is None: return self.DEFAULT_BENCH_BUDGET
        try: return float(value)
        except ValueError as e: raise ConfigError(f'{self.BENCH_BUDGET_VAR} must be a number, not "{value}"') from e

    @staticmethod
    @lru_cache(maxsize=None)
    def has_module(module_name: str) -> bool:
        """Checks if a python package is installed."""
        try:
            import_module(module_name)
            return True
        except ImportError: return False


# Decorators -----------------------------------------------------------------------------------------------------------
def jit(signature_or_function=None, **options) -> Callable:
    """
    Conditional Numba JIT decorator.

    If 'numba' is installed (checked via RESOURCES), this applies `numba.jit`
    with the provided arguments. Otherwise, it returns the original function unmodified,
    ignoring any compilation options.

    Examples:
        >>> @jit  # Bare usage
        ... def func(): ...

        >>> @jit(nopython=True, cache=True)  # Configured usage
        ... def func(): ...
    """
    if not RESOURCES.has_numba:
        if callable(signature_or_function): return signature_or_function
        def passthrough(func: Callable) -> Callable: return func
        return passthrough
    from numba import jit as real_jit
    if callable(signature_or_function): return real_jit(signature_or_function)
    return real_jit(signature_or_function, **options)


# Constants ------------------------------------------------------------------------------------------------------------
RESOURCES = Resources()
