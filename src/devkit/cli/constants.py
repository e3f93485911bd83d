"""Shared constants for devkit CLI commands."""

# Malformed invocation, help requested, or no command given
EXIT_USAGE = 2

# Plan file missing, unreadable, not a list, or empty
EXIT_CONFIG = 3

MISSING_PLAN_DIRECTIVE = "Have you run 'dk init' yet?"
INVALID_PLAN_DIRECTIVE = "Please fix the plan file or re-run 'dk init'."
