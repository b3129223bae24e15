"""Topics menu command handlers."""

import httpx

from ..config import API_URL, REQUEST_TIMEOUT, load_token


def list_topics():
    """Print the course topics menu."""
    headers = {}
    token = load_token()
    if token:
        headers["Authorization"] = f"Bearer {token}"

    try:
        response = httpx.get(f"{API_URL}/topics", headers=headers, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except httpx.ConnectError:
        print("Error: Could not connect to API server.")
        print("Please start the server with: python -m api.server\n")
        return
    except httpx.HTTPStatusError as e:
        print(f"Error: Failed to list topics: {e.response.status_code}\n")
        return
    except httpx.HTTPError as e:
        print(f"Error: API request failed: {e}\n")
        return

    topics = data.get("topics", [])
    if not topics:
        print("\nNo topics available.\n")
        return

    scope = "released for your organization" if data.get("filtered") else "all"
    print(f"\n=== Course Topics ({len(topics)}, {scope}) ===\n")
    for topic in topics:
        print(f"  [{topic.get('id')}] {topic.get('title') or 'Untitled'}")
    print()
