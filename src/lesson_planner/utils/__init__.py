"""Subprocess, git and logging helpers for lesson-planner."""
