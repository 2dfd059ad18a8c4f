"""Main entry point for lesson-planner.

Supports both direct invocation (`python -m lesson_planner`) and the
package entry point.
"""

from lesson_planner.cli import main

if __name__ == "__main__":
    main()
