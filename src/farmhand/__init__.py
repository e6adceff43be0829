"""farmhand: automatic task-reward claiming for the game client bot."""

from .bootstrap import configure_logging, create_task_system, run_task_system
from .tasks.task_system import TaskSystem

__all__ = ["TaskSystem", "configure_logging", "create_task_system", "run_task_system"]
