"""Terminal frontend for the task list.

Commands use the 1-based position shown in the current (filtered) view.
"""
import asyncio
import logging
import sys
from typing import List, Optional

import config
from client.api import TaskApiClient
from client.cache import LocalStorage
from client.controller import TaskController, TaskFilter
from schemas.task import TaskResponse

logger = logging.getLogger(__name__)

HELP = (
    "Commands: add <text> | toggle <n> | restore <n> | delete <n> | "
    "filter all|active|completed | refresh | help | quit"
)


def render(tasks: List[TaskResponse], task_filter: TaskFilter) -> str:
    header = " ".join(
        f"[{f.value.capitalize()}]" if f == task_filter else f.value.capitalize() for f in TaskFilter
    )
    lines = ["Task Manager", header, ""]
    if not tasks:
        lines.append("  No tasks to show")
    for number, task in enumerate(tasks, start=1):
        mark = "x" if task.is_completed else " "
        tag = "  (Completed)" if task.is_completed else ""
        lines.append(f"{number:>3}. [{mark}] {task.description}{tag}")
    return "\n".join(lines)


def _pick(controller: TaskController, argument: str) -> Optional[TaskResponse]:
    try:
        index = int(argument) - 1
    except ValueError:
        return None
    visible = controller.visible_tasks
    return visible[index] if 0 <= index < len(visible) else None


async def handle_command(controller: TaskController, line: str) -> bool:
    """Runs one command line; returns False when the session should end."""
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    if command in ("quit", "exit", "q"):
        return False
    if command == "add":
        if not argument.strip():
            print("Nothing to add: the description is empty.")
        else:
            await controller.add(argument)
    elif command in ("toggle", "restore", "delete"):
        task = _pick(controller, argument)
        if task is None:
            print(f"No task at position {argument!r}.")
        elif command == "delete":
            await controller.delete(task.id)
        elif command == "restore" and not task.is_completed:
            print("Only completed tasks can be restored.")
        else:
            await controller.toggle(task.id)
    elif command == "filter":
        try:
            controller.set_filter(argument.strip().lower() or TaskFilter.ALL)
        except ValueError:
            print(f"Unknown filter {argument!r}.")
    elif command == "refresh":
        await controller.refresh()
    elif command in ("", "help", "?"):
        print(HELP)
    else:
        print(f"Unknown command {command!r}. {HELP}")
    return True


async def run(base_url: str = config.API_BASE_URL, cache_path=config.CACHE_PATH) -> None:
    async with TaskApiClient(base_url) as api:
        controller = TaskController(api, LocalStorage(cache_path))
        controller.on_change = lambda: print(render(controller.visible_tasks, controller.filter) + "\n")
        await controller.start()
        print(HELP)
        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except EOFError:
                break
            if not await handle_command(controller, line):
                break


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.LOG_LEVEL)
    base_url = argv[0] if argv else config.API_BASE_URL
    logger.debug(f"Using task API at {base_url}")
    try:
        asyncio.run(run(base_url))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
