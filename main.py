"""Main entry point for the classroom assistant CLI."""

from classroom_assistant.cli import main


if __name__ == "__main__":
    main()
