#!/usr/bin/env python3
"""Download GitHub's GraphQL schema as SDL.

Usage:
    GITHUB_TOKEN=... python examples/github_schema.py ./github.graphql
"""

import os
import sys

from gql_introspector.core import Introspector


def main():
    token = os.environ.get("GITHUB_TOKEN")
    if not token:
        print("Set GITHUB_TOKEN to a personal access token.")
        return 1

    output = sys.argv[1] if len(sys.argv) > 1 else "./output.graphql"

    (
        Introspector()
        .add("Authorization", f"Bearer {token}")
        .add("User-Agent", "Awesome-Octocat-App")
        .get_schema("https://api.github.com/graphql")
        .build()
        .write(output)
    )

    print(f"Schema introspection and write completed: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
