from .help import COMMANDS, help_command, help_text
from .roll import inline_roll, roll_command

__all__ = [
    "COMMANDS",
    "help_command",
    "help_text",
    "inline_roll",
    "roll_command",
]
