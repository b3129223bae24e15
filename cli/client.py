"""Main CLI client with REPL loop."""

import os

from .commands import (
    list_topics,
    load_notes,
    logout_user,
    new_display,
    retry_notes,
    search_notes,
    set_token,
    show_filters,
    toggle_filter,
)
from .config import load_token


def print_help():
    print("\nNotes Commands:")
    print("  /notes - Load notes and show them")
    print("  /retry - Retry after a failed load")
    print("  /search <text> - Show only notes containing text (empty clears)")
    print("  /toggle <public|private|articles> - Turn a category on or off")
    print("  /filters - Show the current filters")
    print("\nTopic Commands:")
    print("  /topics - Show the course topics menu")
    print("  /token <jwt> - Save your access token")
    print("  /logout - Forget the saved access token")
    print("\nUtility Commands:")
    print("  /help - Show this help")
    print("  /clear - Clear the terminal screen")
    print("\nType 'exit' or 'quit' to leave.")


def main():
    """CLI client for the employee notes API."""
    print("Welcome to the Employee Notes CLI!")
    print_help()
    print("Note: Make sure the API server is running (python -m api.server)\n")

    if load_token():
        print("✓ Access token found; the topics menu is personalized.\n")

    display = new_display()

    while True:
        try:
            user_input = input("notes> ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye!")
            break

        if not user_input:
            continue

        if user_input.lower() in ["exit", "quit"]:
            print("\nGoodbye!")
            break

        command, _, args = user_input.partition(" ")
        command = command.lower()

        if command == "/notes":
            load_notes(display)
        elif command == "/retry":
            retry_notes(display)
        elif command == "/search":
            search_notes(display, args)
        elif command == "/toggle":
            toggle_filter(display, args)
        elif command == "/filters":
            show_filters(display)
        elif command == "/topics":
            list_topics()
        elif command == "/token":
            set_token(args)
        elif command == "/logout":
            logout_user()
        elif command == "/help":
            print_help()
            print()
        elif command == "/clear":
            # Clear terminal screen (cross-platform)
            os.system("cls" if os.name == "nt" else "clear")
        else:
            print(f"Unknown command: {command}. Type /help for commands.\n")


if __name__ == "__main__":
    main()
