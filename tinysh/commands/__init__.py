"""
Builtin command implementations.

Each module in this package defines one builtin and registers it with
@register_command. The set of builtins is fixed: load_all_commands()
imports exactly the modules listed in COMMAND_MODULES.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

# Module names differ from command names where the name is a Python builtin
COMMAND_MODULES = (
    'exit_cmd',
    'echo',
    'type_cmd',
    'pwd',
    'cd',
)


def register_command(name: str) -> Callable:
    """
    Register an executor under a command name.

    Raises:
        ValueError: If the name is already taken
    """
    def decorator(func: Callable) -> Callable:
        if name in BUILTINS and BUILTINS[name] is not func:
            raise ValueError(f"command '{name}' is already registered")
        BUILTINS[name] = func
        return func

    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module so that BUILTINS is populated"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f"{__name__}.{module_name}")
    return BUILTINS
