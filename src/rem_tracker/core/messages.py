# src/rem_tracker/core/messages.py

"""Fixed user-facing strings shared by the parser, commands and console."""

from __future__ import annotations

WELCOME = "Hello! I'm {app_name}. :D\nWhat can I do for you today?"
FAREWELL = "Bye! Hope to see you again soon! :)"
UNKNOWN_COMMAND = "Sorry, I don't understand what that means. T^T"
EMPTY_INPUT = "Please type a command, e.g. 'todo read book' or 'list'."

TASK_ADDED = "I've added this task for you! :>"
TASK_REMOVED = "Noted. I've removed this task:"
TASK_MARKED = "Nice! I've marked this task as done:"
TASK_UNMARKED = "OK, I've marked this task as not done yet:"

LIST_HEADER = "Here are the tasks in your list:"
LIST_EMPTY = "You have no tasks in your list yet!"
FIND_HEADER = "Here are the matching tasks in your list:"
FIND_EMPTY = "No tasks in your list match '{keyword}'."

SAVE_FAILED = "(Warning: I couldn't save your tasks: {reason})"
LOAD_FAILED = "Warning: I couldn't read your saved tasks, so I'm starting with an empty list. ({reason})"


def task_count(n: int) -> str:
    return f"You have {n} {'task' if n == 1 else 'tasks'}! :D"
