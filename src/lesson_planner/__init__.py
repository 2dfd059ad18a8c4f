"""lesson-planner - generate lesson repositories with the goose agent.

Assembles a prompt from a lesson specification, the voice-and-tone and
repository-structure guides and a prompt template, runs goose with it in
the target repository, and optionally pushes the resulting branch.
"""

__version__ = "0.1.0"
