"""Access token command handlers."""

from ..config import delete_token, save_token


def set_token(args: str = ""):
    """Store a backend-issued access token used to personalize the topics menu."""
    token = args.strip() or input("Access token: ").strip()

    if not token:
        print("Error: A token is required.\n")
        return

    save_token(token)
    print("\n✓ Token saved. The topics menu will follow your organization's schedule.\n")


def logout_user():
    """Forget the stored access token."""
    delete_token()
    print("\n✓ Logged out successfully.\n")
