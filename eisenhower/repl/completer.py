"""
FILE: eisenhower/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - EisenhowerCompleter (Completer for command/arg completion)
  - create_completer(store) -> EisenhowerCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - eisenhower.core (TaskStore, TaskList)
NOTES:
  - Suggests command names when at start of line
  - Suggests task IDs for commands expecting IDs (mv, drag, done, rm)
  - Suggests list names where a list is expected (mv target, drop, rm, ls, --from)
  - Case-insensitive matching
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.models import TaskList
from ..core.store import TaskStore
from ..formatting import short_id


class EisenhowerCompleter(Completer):
    """
    Custom completer for the Eisenhower REPL.

    Reads the store on every keystroke, so IDs and counts are always current.
    """

    COMMANDS = [
        "add", "board", "ls", "lists", "mv", "drag", "drop", "cancel",
        "done", "rm", "help", "clear", "exit", "quit",
    ]

    # Commands whose first argument is a task ID
    ID_FIRST_COMMANDS = {"mv", "drag", "done", "rm"}

    # Commands whose first argument is a list name
    LIST_FIRST_COMMANDS = {"drop", "ls"}

    # Commands whose second argument is a list name
    LIST_SECOND_COMMANDS = {"mv", "rm"}

    COMMAND_FLAGS = {
        "mv": ["--from"],
    }

    COMMAND_DESCRIPTIONS = {
        "add": "Add a task to the inbox",
        "board": "Show inbox and quadrants",
        "ls": "Show one list (or the board)",
        "lists": "Show list names and counts",
        "mv": "Move task to another list",
        "drag": "Pick a task up",
        "drop": "Drop the dragged task",
        "cancel": "Put the dragged task back",
        "done": "Check off task(s)",
        "rm": "Remove task from one list",
        "help": "Show available commands",
        "clear": "Clear the screen",
        "exit": "Exit REPL",
        "quit": "Exit REPL",
    }

    def __init__(self, store: TaskStore):
        self.store = store

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. At start of input -> suggest commands
            2. After --from -> suggest list names
            3. Positional argument -> task IDs or list names, by command
            4. Typing a flag -> suggest the command's flags
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_new_word = text_before_cursor.endswith(" ")

        # Case 1: Empty input or typing the first word -> suggest commands
        if not words or (not at_new_word and len(words) == 1):
            yield from self._complete_commands(words[0] if words else "")
            return

        command = words[0].lower()
        word = "" if at_new_word else words[-1]
        previous = words if at_new_word else words[:-1]

        # Case 2: Value for --from
        if previous[-1] == "--from":
            yield from self._complete_list_names(word)
            return

        # Case 3: Typing a flag
        if word.startswith("-"):
            yield from self._complete_flags(command, word)
            return

        # Position of the word being completed, ignoring flags and their values
        position = len(self._positional(previous[1:])) + 1

        if position == 1 and command in self.ID_FIRST_COMMANDS:
            yield from self._complete_task_ids(word)
        elif command == "done" and position > 1:
            # done takes several IDs
            yield from self._complete_task_ids(word)
        elif position == 1 and command in self.LIST_FIRST_COMMANDS:
            yield from self._complete_list_names(word)
        elif position == 2 and command in self.LIST_SECOND_COMMANDS:
            yield from self._complete_list_names(word)

    @staticmethod
    def _positional(words):
        positional = []
        skip_next = False
        for word in words:
            if skip_next:
                skip_next = False
            elif word.startswith("--"):
                skip_next = True
            else:
                positional.append(word)
        return positional

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.COMMAND_DESCRIPTIONS.get(command, ""),
                )

    def _complete_flags(self, command: str, word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for flag in self.COMMAND_FLAGS.get(command, []):
            if flag.startswith(word_lower):
                yield Completion(flag, start_position=-len(word), display=flag)

    def _complete_list_names(self, word: str) -> Iterable[Completion]:
        """
        Complete list names.

        Short action names (do, schedule, ...) come first; the stored names
        (urgentImportant, ...) are offered once they match what was typed.
        """
        word_lower = word.lower()
        counts = self.store.collection.counts()

        seen = set()
        for task_list in TaskList:
            for name in (task_list.descriptor.action, task_list.value):
                if name in seen or not name.lower().startswith(word_lower):
                    continue
                if name == task_list.value and not word:
                    continue
                seen.add(name)
                yield Completion(
                    name,
                    start_position=-len(word),
                    display=name,
                    display_meta=f"{task_list.descriptor.title} ({counts[task_list]})",
                )

    def _complete_task_ids(self, word: str) -> Iterable[Completion]:
        """Complete task IDs, labelled with content and list."""
        # IDs match case-sensitively, like resolve_task_id
        for task_list, tasks in self.store.collection.items():
            for task in tasks:
                if not task.id.startswith(word):
                    continue
                content = task.content.strip()
                display_content = content if len(content) <= 40 else content[:37] + "..."
                yield Completion(
                    short_id(task.id) if len(word) < len(short_id(task.id)) else task.id,
                    start_position=-len(word),
                    display=short_id(task.id),
                    display_meta=f"{display_content} [{task_list.descriptor.action}]",
                )


def create_completer(store: TaskStore) -> EisenhowerCompleter:
    """
    Create a completer bound to a task store.

    Usage:
        completer = create_completer(store)
        session = PromptSession(completer=completer)
    """
    return EisenhowerCompleter(store)
