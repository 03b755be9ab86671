"""
FILE: taskboard/core/constants.py
PURPOSE: Fixed board configuration (statuses, columns, priorities, aliases)
EXPORTS:
  - STATUS_TODO, STATUS_IN_PROGRESS, STATUS_DONE
  - STATUSES: All statuses in column order
  - COLUMN_TITLES / COLUMN_COLORS: Static display label and colour tag per column
  - PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH
  - PRIORITIES: All priorities, lowest first
  - DEFAULT_PRIORITY: Priority a fresh draft starts with
  - PRIORITY_STYLES: Display treatment per priority
  - STATUS_ALIASES / PRIORITY_ALIASES: Shorthands accepted from user input
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Columns are configuration, never state
  - Colour tags are rich style names; the core never renders them
"""

# Task status constants (column order)
STATUS_TODO = "todo"
STATUS_IN_PROGRESS = "in-progress"
STATUS_DONE = "done"
STATUSES = (STATUS_TODO, STATUS_IN_PROGRESS, STATUS_DONE)

COLUMN_TITLES = {
    STATUS_TODO: "To Do",
    STATUS_IN_PROGRESS: "In Progress",
    STATUS_DONE: "Done",
}

COLUMN_COLORS = {
    STATUS_TODO: "grey50",
    STATUS_IN_PROGRESS: "blue",
    STATUS_DONE: "green",
}

# Priority constants
PRIORITY_LOW = "low"
PRIORITY_MEDIUM = "medium"
PRIORITY_HIGH = "high"
PRIORITIES = (PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH)
DEFAULT_PRIORITY = PRIORITY_MEDIUM

PRIORITY_STYLES = {
    PRIORITY_LOW: "grey62",
    PRIORITY_MEDIUM: "yellow",
    PRIORITY_HIGH: "red",
}

# Shorthands typed at the prompt
STATUS_ALIASES = {
    "t": STATUS_TODO,
    "todo": STATUS_TODO,
    "ip": STATUS_IN_PROGRESS,
    "in-progress": STATUS_IN_PROGRESS,
    "inprogress": STATUS_IN_PROGRESS,
    "doing": STATUS_IN_PROGRESS,
    "d": STATUS_DONE,
    "done": STATUS_DONE,
}

PRIORITY_ALIASES = {
    "l": PRIORITY_LOW,
    "low": PRIORITY_LOW,
    "m": PRIORITY_MEDIUM,
    "med": PRIORITY_MEDIUM,
    "medium": PRIORITY_MEDIUM,
    "h": PRIORITY_HIGH,
    "high": PRIORITY_HIGH,
}

# Number of id characters shown to users (ids are typed as prefixes)
SHORT_ID_LENGTH = 8
