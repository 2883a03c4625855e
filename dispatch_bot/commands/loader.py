"""
Command Loader
Discovers command modules in a package and registers them
"""

import importlib
import pkgutil

from dispatch_bot.commands.command import Command
from dispatch_bot.commands.command_registry import CommandRegistry
from dispatch_bot.utils.logger import get_logger

logger = get_logger("Loader")

BUILTIN_PACKAGE = "dispatch_bot.commands.builtin"


def load_commands(registry: CommandRegistry, package: str = BUILTIN_PACKAGE) -> int:
    """
    Import every module in a package and register its `command`.

    A module that fails to import is logged and skipped.

    Args:
        registry: Registry to register into
        package: Dotted package name to scan

    Returns:
        Number of commands registered
    """
    pkg = importlib.import_module(package)
    loaded = 0

    for module_info in pkgutil.iter_modules(pkg.__path__):
        if module_info.name.startswith("_"):
            continue

        module_name = f"{package}.{module_info.name}"
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            logger.error(f"Failed to load {module_name}: {e}")
            continue

        command = getattr(module, "command", None)
        if not isinstance(command, Command):
            logger.debug(f"Skipping {module_name}: no command defined")
            continue

        if registry.register(command):
            loaded += 1

    logger.info(f"Loaded {loaded} commands from {package}")
    return loaded
